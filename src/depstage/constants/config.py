"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "depstage.yaml"

DEFAULT_IMAGE_BASE: str = "eclipse-temurin:8-jre"
DEFAULT_DEPLOY_DIR: str = "/local/deploy"
DEFAULT_STAGING_DIR: str = "target/docker/dependencies"
DEFAULT_DEPENDENCIES_FILE: str = "dependencies.yaml"
DEFAULT_BUILDER_COMMAND: tuple[str, ...] = ("docker", "build")
DEFAULT_HASH_WORKERS: int = 1
DEFAULT_ARTIFACT_PATTERN: str = "*.jar"
