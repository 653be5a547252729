"""Shared exception hierarchy for depstage."""

from __future__ import annotations

from .base import DepstageError
from .build import BuildError, RecordWriteError
from .config import ConfigError
from .resolution import ResolutionError
from .staging import HashError, StagingError

__all__ = [
    "BuildError",
    "ConfigError",
    "DepstageError",
    "HashError",
    "RecordWriteError",
    "ResolutionError",
    "StagingError",
]
