"""Config loading and normalization for depstage builds."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from depstage.config.model import DepstageConfig
from depstage.constants.config import (
    CONFIG_FILENAME,
    DEFAULT_BUILDER_COMMAND,
    DEFAULT_DEPENDENCIES_FILE,
    DEFAULT_DEPLOY_DIR,
    DEFAULT_HASH_WORKERS,
    DEFAULT_IMAGE_BASE,
    DEFAULT_STAGING_DIR,
)
from depstage.exceptions import ConfigError


def load_config(root: Path, config_path: Path | None = None) -> DepstageConfig:
    """Load and validate build config from ``depstage.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return DepstageConfig(image_name=root.name)

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    deploy_dir = _ensure_string(raw.get("deploy_dir", DEFAULT_DEPLOY_DIR), "deploy_dir", allow_empty=False)
    if not deploy_dir.startswith("/"):
        raise ConfigError("deploy_dir must be an absolute path inside the image")

    builder_command = raw.get("builder_command", list(DEFAULT_BUILDER_COMMAND))
    if (
        not isinstance(builder_command, (list, tuple))
        or not builder_command
        or not all(isinstance(part, str) and part.strip() for part in builder_command)
    ):
        raise ConfigError("builder_command must be a non-empty list of strings")

    timeout = raw.get("build_timeout_seconds")
    if timeout is not None and (isinstance(timeout, bool) or not isinstance(timeout, int) or timeout <= 0):
        raise ConfigError("build_timeout_seconds must be a positive integer or null")

    hash_workers = raw.get("hash_workers", DEFAULT_HASH_WORKERS)
    if isinstance(hash_workers, bool) or not isinstance(hash_workers, int) or hash_workers <= 0:
        raise ConfigError("hash_workers must be a positive integer")

    return DepstageConfig(
        image_name=_ensure_string(raw.get("image_name", root.name), "image_name", allow_empty=False),
        image_registry_host=_ensure_string(raw.get("image_registry_host", ""), "image_registry_host"),
        image_name_prefix=_ensure_string(raw.get("image_name_prefix", ""), "image_name_prefix"),
        image_base=_ensure_string(raw.get("image_base", DEFAULT_IMAGE_BASE), "image_base", allow_empty=False),
        deploy_dir=deploy_dir,
        staging_dir=_ensure_string(raw.get("staging_dir", DEFAULT_STAGING_DIR), "staging_dir", allow_empty=False),
        dependencies_file=_ensure_string(
            raw.get("dependencies_file", DEFAULT_DEPENDENCIES_FILE),
            "dependencies_file",
            allow_empty=False,
        ),
        builder_command=tuple(builder_command),
        build_timeout_seconds=timeout,
        hash_workers=hash_workers,
    )


def _ensure_string(value: Any, key_name: str, *, allow_empty: bool = True) -> str:
    """Coerce a value to a stripped string, raising ConfigError on type mismatch."""
    if not isinstance(value, str):
        raise ConfigError(f"{key_name} must be a string")
    stripped = value.strip()
    if not allow_empty and not stripped:
        raise ConfigError(f"{key_name} must not be empty")
    return stripped
