"""Shared constants for depstage."""
