"""Command-line interface for depstage."""
