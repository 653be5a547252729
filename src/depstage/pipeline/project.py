"""Project-level entry point tying config, resolution, and orchestration together."""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

from depstage.builder import ImageBuilder
from depstage.config import DepstageConfig, load_config
from depstage.exceptions import ConfigError
from depstage.model import BuildResult, DependencyEntry
from depstage.pipeline.orchestrator import build_dependency_image
from depstage.resolver import load_dependency_manifest, resolve_directory

logger = logging.getLogger(__name__)


def resolve_project_dependencies(
    root: Path,
    config: DepstageConfig,
    *,
    dependencies_path: Path | None = None,
    from_dir: Path | None = None,
) -> list[DependencyEntry]:
    """Resolve dependencies from an artifact directory or the configured manifest."""
    if from_dir is not None:
        return resolve_directory(from_dir)
    return load_dependency_manifest(dependencies_path or config.dependencies_path(root))


def build_project(
    *,
    root: Path,
    config_path: Path | None = None,
    dependencies_path: Path | None = None,
    from_dir: Path | None = None,
    image_name: str | None = None,
    image_base: str | None = None,
    timeout_seconds: int | None = None,
    hash_workers: int | None = None,
    force: bool = False,
    dry_run: bool = False,
    builder: ImageBuilder | None = None,
) -> BuildResult:
    """Build (or reuse) the dependency image for the project at ``root``."""
    root = root.resolve()
    if not root.is_dir():
        raise ConfigError(f"Project root does not exist or is not a directory: {root}")

    config = load_config(root, config_path)
    if image_name is not None:
        config = replace(config, image_name=image_name)
    if image_base is not None:
        config = replace(config, image_base=image_base)
    if timeout_seconds is not None:
        config = replace(config, build_timeout_seconds=timeout_seconds)
    if hash_workers is not None:
        config = replace(config, hash_workers=hash_workers)

    entries = resolve_project_dependencies(root, config, dependencies_path=dependencies_path, from_dir=from_dir)
    logger.info("Resolved %d dependencies for %s", len(entries), config.dependency_image_name)

    if builder is None:
        builder = ImageBuilder(config.builder_command, timeout_seconds=config.build_timeout_seconds)

    return build_dependency_image(
        entries=entries,
        staging_root=config.staging_root(root),
        image_name=config.dependency_image_name,
        builder=builder,
        base_image=config.image_base,
        deploy_dir=config.deploy_dir,
        force=force,
        hash_workers=config.hash_workers,
        dry_run=dry_run,
    )
