"""Root exception for depstage."""

from __future__ import annotations


class DepstageError(Exception):
    """Base class for all depstage errors."""
