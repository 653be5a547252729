"""Dependency manifest loading.

A manifest is a YAML (or JSON) document listing artifacts to stage::

    dependencies:
      - source: ~/.ivy2/cache/com.typesafe/config/jars/config-1.4.2.jar
        module: {organization: com.typesafe, name: config, revision: 1.4.2}
      - source: build/libs/shaded.jar
        destination: shaded.jar

Relative sources resolve against the manifest's directory. Entries without a
``destination`` or ``module`` keep their source file name.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import jsonschema
import yaml

from depstage.constants.dependency_schema import DEPENDENCY_MANIFEST_SCHEMA
from depstage.exceptions import ResolutionError
from depstage.model import DependencyEntry
from depstage.resolver.naming import jar_name, validate_entries

logger = logging.getLogger(__name__)


def load_dependency_manifest(path: Path) -> list[DependencyEntry]:
    """Load, schema-check, and resolve a dependency manifest into entries."""
    path = path.resolve()
    if not path.is_file():
        raise ResolutionError(f"Dependency manifest not found: {path}")

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise ResolutionError(f"Failed to read dependency manifest {path}: {exc}") from exc

    validator = jsonschema.Draft202012Validator(DEPENDENCY_MANIFEST_SCHEMA)
    problems = sorted(validator.iter_errors(raw), key=lambda err: [str(p) for p in err.absolute_path])
    if problems:
        rendered = "; ".join(_format_schema_error(problem) for problem in problems)
        raise ResolutionError(f"Invalid dependency manifest {path}: {rendered}")

    entries = [_entry_from_item(item, base_dir=path.parent) for item in raw["dependencies"]]
    logger.debug("Resolved %d dependencies from %s", len(entries), path)
    return validate_entries(entries)


def _entry_from_item(item: dict[str, Any], *, base_dir: Path) -> DependencyEntry:
    source = Path(item["source"]).expanduser()
    if not source.is_absolute():
        source = base_dir / source

    module = item.get("module")
    if module is not None:
        destination = jar_name(
            module["organization"],
            module["name"],
            module["revision"],
            module.get("classifier"),
        )
    else:
        destination = item.get("destination", source.name)
    return DependencyEntry(source_path=source, destination=destination)


def _format_schema_error(error: jsonschema.ValidationError) -> str:
    location = "/".join(str(part) for part in error.absolute_path) or "<root>"
    return f"{location}: {error.message}"
