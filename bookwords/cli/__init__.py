"""Command-line interface for bookwords."""
