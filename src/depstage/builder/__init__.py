"""Image build context and external builder process."""

from __future__ import annotations

from depstage.builder.image import ImageBuilder
from depstage.builder.manifest import render_manifest, write_manifest
from depstage.builder.process import run_process, spawn, stop_process

__all__ = [
    "ImageBuilder",
    "render_manifest",
    "run_process",
    "spawn",
    "stop_process",
    "write_manifest",
]
