"""Configuration-related exceptions."""

from __future__ import annotations

from depstage.exceptions.base import DepstageError


class ConfigError(DepstageError, ValueError):
    """Raised when depstage configuration is invalid."""
