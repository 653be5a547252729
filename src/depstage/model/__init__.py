"""Core data models for depstage."""

from .entities import BuildContext, BuildResult, DependencyEntry, ImageTags, StagedFile

__all__ = [
    "BuildContext",
    "BuildResult",
    "DependencyEntry",
    "ImageTags",
    "StagedFile",
]
