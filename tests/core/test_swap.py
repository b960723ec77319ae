"""Tests for cpswap/core/swap.py: directional pricing, reserve updates and rejections."""

from __future__ import annotations

import pytest

from cpswap.core import (
    Direction,
    InvalidAmountError,
    InvalidDirectionError,
    InvalidFeeError,
    InvalidPoolError,
    PoolDrainError,
    PoolState,
    Rejection,
    SwapRequest,
    evaluate,
    simulate,
    simulate_swap,
)

BALANCED = PoolState(reserve_a=10_000.0, reserve_b=10_000.0, fee=0.003)


# ---------------------------------------------------------------------------
# simulate_swap
# ---------------------------------------------------------------------------

class TestSimulateSwap:
    def test_balanced_pool_a2b(self):
        r = simulate_swap(BALANCED, "A2B", 100.0)
        assert r.amount_out == pytest.approx(98.715803, abs=1e-5)
        assert r.new_reserve_a == 10_100.0
        assert r.new_reserve_b == pytest.approx(9901.284197, abs=1e-5)
        assert r.effective_price == pytest.approx(0.98715803, abs=1e-7)
        assert r.slippage_percent == pytest.approx(1.284197, abs=1e-5)

    def test_balanced_pool_b2a_mirrors_a2b(self):
        a2b = simulate_swap(BALANCED, Direction.A_TO_B, 100.0)
        b2a = simulate_swap(BALANCED, Direction.B_TO_A, 100.0)
        assert b2a.amount_out == a2b.amount_out
        assert b2a.new_reserve_a == a2b.new_reserve_b
        assert b2a.new_reserve_b == a2b.new_reserve_a
        assert b2a.slippage_percent == a2b.slippage_percent

    def test_unbalanced_pool_a2b_uses_b_per_a(self):
        pool = PoolState(reserve_a=1000.0, reserve_b=4000.0, fee=0.0)
        r = simulate_swap(pool, "A2B", 1000.0)
        assert r.amount_out == 2000.0
        assert (r.new_reserve_a, r.new_reserve_b) == (2000.0, 2000.0)
        assert r.effective_price == 2.0
        assert r.slippage_percent == 50.0

    def test_unbalanced_pool_b2a_uses_a_per_b(self):
        pool = PoolState(reserve_a=1000.0, reserve_b=4000.0, fee=0.0)
        r = simulate_swap(pool, "B2A", 4000.0)
        assert r.amount_out == 500.0
        assert r.new_reserve_a == 500.0
        assert r.new_reserve_b == 8000.0
        assert r.effective_price == 0.125
        assert r.slippage_percent == 50.0

    @pytest.mark.parametrize("token", ["a2b", "A2b", "a_to_b", "A_TO_B", Direction.A_TO_B])
    def test_direction_is_case_insensitive(self, token):
        assert simulate_swap(BALANCED, token, 250.0) == simulate_swap(BALANCED, "A2B", 250.0)

    def test_input_pool_is_not_mutated(self):
        pool = PoolState(reserve_a=500.0, reserve_b=800.0, fee=0.003)
        simulate_swap(pool, "B2A", 40.0)
        assert pool == PoolState(reserve_a=500.0, reserve_b=800.0, fee=0.003)

    def test_fee_accrues_to_pool(self):
        r = simulate_swap(BALANCED, "A2B", 2_000.0)
        assert r.new_reserve_a * r.new_reserve_b > BALANCED.reserve_a * BALANCED.reserve_b

    def test_slippage_grows_with_trade_size(self):
        slips = [simulate_swap(BALANCED, "A2B", BALANCED.reserve_a * f).slippage_percent for f in (0.01, 0.1, 0.4)]
        assert slips == sorted(slips)
        assert slips[0] > 0.0

    def test_chained_trades_through_apply(self):
        first = simulate_swap(BALANCED, "A2B", 1_000.0)
        after = BALANCED.apply(first)
        back = simulate_swap(after, "B2A", first.amount_out)
        # Round trip pays the fee twice, so the trader gets back less than 1_000.
        assert back.amount_out < 1_000.0
        assert after.fee == BALANCED.fee


# ---------------------------------------------------------------------------
# rejections
# ---------------------------------------------------------------------------

class TestRejections:
    def test_pool_draining_trade_rejected(self):
        pool = PoolState(reserve_a=10.0, reserve_b=10.0, fee=0.003)
        with pytest.raises(PoolDrainError, match="drain the pool"):
            simulate_swap(pool, "A2B", 1e9)

    def test_pool_draining_trade_rejected_b2a(self):
        pool = PoolState(reserve_a=10.0, reserve_b=10.0, fee=0.0)
        with pytest.raises(PoolDrainError):
            simulate_swap(pool, "B2A", 1e12)

    @pytest.mark.parametrize("direction", ["A2B", "B2A"])
    def test_overflowing_quote_rejected_not_nan(self, direction):
        pool = PoolState(reserve_a=1.7e308, reserve_b=1.7e308, fee=0.0)
        with pytest.raises(PoolDrainError):
            simulate_swap(pool, direction, 1.7e308)

    def test_overflowing_quote_tagged_as_drain(self):
        pool = PoolState(reserve_a=1.7e308, reserve_b=1.7e308, fee=0.0)
        o = evaluate(pool, "A2B", 1.7e308)
        assert not o.accepted
        assert o.rejection is Rejection.POOL_DRAIN

    @pytest.mark.parametrize("fee", [1.0, 2.0])
    def test_fee_of_one_or_more_rejected(self, fee):
        pool = PoolState(reserve_a=10_000.0, reserve_b=10_000.0, fee=fee)
        with pytest.raises(InvalidFeeError):
            simulate_swap(pool, "A2B", 100.0)

    @pytest.mark.parametrize("reserves", [(0.0, 1.0), (1.0, 0.0), (-1.0, -1.0)])
    def test_bad_reserves_rejected_before_direction(self, reserves):
        pool = PoolState(reserve_a=reserves[0], reserve_b=reserves[1], fee=0.003)
        with pytest.raises(InvalidPoolError, match="reserveA and reserveB must be > 0"):
            simulate_swap(pool, "sideways", 1.0)

    @pytest.mark.parametrize("token", ["", "AB", "A2C", "b_to_c", None, 1])
    def test_unknown_direction_rejected(self, token):
        with pytest.raises(InvalidDirectionError, match="direction must be A2B or B2A"):
            simulate_swap(BALANCED, token, 1.0)

    @pytest.mark.parametrize("amount_in", [0.0, -10.0])
    def test_non_positive_amount_rejected(self, amount_in):
        with pytest.raises(InvalidAmountError):
            simulate_swap(BALANCED, "B2A", amount_in)


# ---------------------------------------------------------------------------
# simulate / evaluate
# ---------------------------------------------------------------------------

def test_simulate_takes_request() -> None:
    req = SwapRequest(pool=BALANCED, direction=Direction.B_TO_A, amount_in=100.0)
    assert simulate(req) == simulate_swap(BALANCED, "B2A", 100.0)


def test_evaluate_accepts() -> None:
    o = evaluate(BALANCED, "A2B", 100.0)
    assert o.accepted
    assert o.result == simulate_swap(BALANCED, "A2B", 100.0)
    assert o.rejection is None
    assert o.reason is None


@pytest.mark.parametrize(
    "pool,direction,amount_in,kind",
    [
        (PoolState(0.0, 1.0, 0.003), "A2B", 1.0, Rejection.INVALID_POOL),
        (PoolState(1.0, 1.0, 1.0), "A2B", 1.0, Rejection.INVALID_FEE),
        (PoolState(1.0, 1.0, 0.003), "A2B", 0.0, Rejection.INVALID_AMOUNT),
        (PoolState(1.0, 1.0, 0.003), "up", 1.0, Rejection.INVALID_DIRECTION),
        (PoolState(10.0, 10.0, 0.003), "A2B", 1e9, Rejection.POOL_DRAIN),
    ],
)
def test_evaluate_tags_each_rejection(pool, direction, amount_in, kind) -> None:
    o = evaluate(pool, direction, amount_in)
    assert not o.accepted
    assert o.result is None
    assert o.rejection is kind
    assert o.reason
