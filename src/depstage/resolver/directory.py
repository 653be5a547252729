"""Resolve every matching artifact in a directory."""

from __future__ import annotations

from pathlib import Path

from depstage.constants.config import DEFAULT_ARTIFACT_PATTERN
from depstage.exceptions import ResolutionError
from depstage.model import DependencyEntry
from depstage.resolver.naming import validate_entries


def resolve_directory(directory: Path, pattern: str = DEFAULT_ARTIFACT_PATTERN) -> list[DependencyEntry]:
    """Map files in ``directory`` matching ``pattern`` to entries keyed by file name."""
    directory = directory.resolve()
    if not directory.is_dir():
        raise ResolutionError(f"Dependency directory does not exist: {directory}")
    entries = [
        DependencyEntry(source_path=path, destination=path.name)
        for path in sorted(directory.glob(pattern))
        if path.is_file()
    ]
    return validate_entries(entries)
