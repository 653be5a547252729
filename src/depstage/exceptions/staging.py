"""Staging and fingerprinting exceptions."""

from __future__ import annotations

from depstage.exceptions.base import DepstageError


class StagingError(DepstageError):
    """Raised when dependency files cannot be copied into or removed from the staging tree."""


class HashError(DepstageError):
    """Raised when a staged file cannot be read for fingerprinting."""
