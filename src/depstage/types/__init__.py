"""Shared type aliases for depstage."""

from .common import BuildErrorKind, BuildState, Fingerprint

__all__ = [
    "BuildErrorKind",
    "BuildState",
    "Fingerprint",
]
