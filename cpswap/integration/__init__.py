"""
Presentation layer: argument parsing, demo configuration, rendering and the CLI.
"""
