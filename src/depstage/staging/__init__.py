"""Dependency staging."""

from __future__ import annotations

from depstage.staging.stager import remove_stale, stage, stale_files

__all__ = ["remove_stale", "stage", "stale_files"]
