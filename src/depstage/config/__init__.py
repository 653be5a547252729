"""Configuration loading, validation, and normalization for depstage builds.

This package facade re-exports all public names so that
``from depstage.config import ...`` statements stay short.
"""

from __future__ import annotations

from depstage.config.loader import load_config
from depstage.config.model import DepstageConfig
from depstage.config.validator import preflight_validate, validate_config_file

__all__ = [
    "DepstageConfig",
    "load_config",
    "preflight_validate",
    "validate_config_file",
]
