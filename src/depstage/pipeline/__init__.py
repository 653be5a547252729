"""Dependency image pipeline package."""

from __future__ import annotations

from typing import Any

__all__ = ["build_dependency_image", "build_project"]


def __getattr__(name: str) -> Any:
    """Lazily expose pipeline APIs to avoid import cycles at package import time."""
    if name == "build_dependency_image":
        from .orchestrator import build_dependency_image

        return build_dependency_image
    if name == "build_project":
        from .project import build_project

        return build_project
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
