"""File-based dependency resolvers producing ``DependencyEntry`` lists."""

from __future__ import annotations

from depstage.resolver.directory import resolve_directory
from depstage.resolver.manifest import load_dependency_manifest
from depstage.resolver.naming import jar_name, validate_entries

__all__ = [
    "jar_name",
    "load_dependency_manifest",
    "resolve_directory",
    "validate_entries",
]
