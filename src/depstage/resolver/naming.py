"""Destination naming and sanity checks for resolved dependencies."""

from __future__ import annotations

from pathlib import PurePosixPath

from depstage.exceptions import ResolutionError
from depstage.model import DependencyEntry


def jar_name(organization: str, name: str, revision: str, classifier: str | None = None) -> str:
    """Render the staged jar file name for a module coordinate.

    Prefixing the organization keeps same-named artifacts from different
    groups from colliding inside the flat ``lib`` directory.
    """
    base = f"{organization}.{name}-{revision}"
    if classifier:
        base = f"{base}-{classifier}"
    return f"{base}.jar"


def normalize_destination(destination: str) -> str:
    """Return a canonical relative POSIX destination or raise ``ResolutionError``."""
    candidate = destination.replace("\\", "/").strip()
    path = PurePosixPath(candidate)
    if not candidate or path.is_absolute():
        raise ResolutionError(f"Dependency destination must be a relative path: {destination!r}")
    if any(part == ".." for part in path.parts):
        raise ResolutionError(f"Dependency destination escapes the staging directory: {destination!r}")
    normalized = path.as_posix()
    if normalized == ".":
        raise ResolutionError(f"Dependency destination must name a file: {destination!r}")
    return normalized


def validate_entries(entries: list[DependencyEntry]) -> list[DependencyEntry]:
    """Check that sources exist and destinations are unique, returning normalized entries."""
    normalized: list[DependencyEntry] = []
    seen: dict[str, DependencyEntry] = {}
    for entry in entries:
        destination = normalize_destination(entry.destination)
        if not entry.source_path.is_file():
            raise ResolutionError(f"Dependency source is not a file: {entry.source_path}")
        previous = seen.get(destination)
        if previous is not None:
            raise ResolutionError(
                f"Duplicate dependency destination {destination!r}: "
                f"{previous.source_path} and {entry.source_path}"
            )
        resolved = DependencyEntry(source_path=entry.source_path, destination=destination)
        seen[destination] = resolved
        normalized.append(resolved)
    return normalized
