"""Dependency resolution exceptions."""

from __future__ import annotations

from depstage.exceptions.base import DepstageError


class ResolutionError(DepstageError):
    """Raised when the declared dependency set cannot be produced."""
