"""Config data model for depstage builds."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from depstage.constants.build import DEPENDENCY_IMAGE_SUFFIX
from depstage.constants.config import (
    DEFAULT_BUILDER_COMMAND,
    DEFAULT_DEPENDENCIES_FILE,
    DEFAULT_DEPLOY_DIR,
    DEFAULT_HASH_WORKERS,
    DEFAULT_IMAGE_BASE,
    DEFAULT_STAGING_DIR,
)


@dataclass(frozen=True)
class DepstageConfig:
    """Resolved build config."""

    image_name: str
    image_registry_host: str = ""
    image_name_prefix: str = ""
    image_base: str = DEFAULT_IMAGE_BASE
    deploy_dir: str = DEFAULT_DEPLOY_DIR
    staging_dir: str = DEFAULT_STAGING_DIR
    dependencies_file: str = DEFAULT_DEPENDENCIES_FILE
    builder_command: tuple[str, ...] = DEFAULT_BUILDER_COMMAND
    build_timeout_seconds: int | None = None
    hash_workers: int = DEFAULT_HASH_WORKERS

    @property
    def dependency_image_name(self) -> str:
        """Stable image name of the dependency image.

        Rendered as ``{registry}/{prefix}/{image_name}-dependencies`` with empty
        components left out.
        """
        parts = [self.image_registry_host.strip("/"), self.image_name_prefix.strip("/")]
        parts.append(f"{self.image_name}{DEPENDENCY_IMAGE_SUFFIX}")
        return "/".join(part for part in parts if part)

    def staging_root(self, root: Path) -> Path:
        """Absolute staging directory for a project rooted at ``root``."""
        return _resolve_under(root, self.staging_dir)

    def dependencies_path(self, root: Path) -> Path:
        """Absolute path of the dependency manifest for a project rooted at ``root``."""
        return _resolve_under(root, self.dependencies_file)


def _resolve_under(root: Path, value: str) -> Path:
    path = Path(value)
    if path.is_absolute():
        return path
    return (root / path).resolve()
