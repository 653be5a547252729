"""Tests for config loading and validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from depstage.config import DepstageConfig, load_config, preflight_validate, validate_config_file
from depstage.exceptions import ConfigError


def _write_config(root: Path, body: str) -> Path:
    path = root / "depstage.yaml"
    path.write_text(body, encoding="utf-8")
    return path


def test_missing_config_uses_defaults(tmp_path: Path) -> None:
    root = tmp_path / "my-service"
    root.mkdir()

    config = load_config(root)

    assert config.image_name == "my-service"
    assert config.builder_command == ("docker", "build")
    assert config.dependency_image_name == "my-service-dependencies"
    assert config.staging_root(root) == (root / "target" / "docker" / "dependencies").resolve()


def test_load_config_reads_all_keys(tmp_path: Path) -> None:
    _write_config(
        tmp_path,
        """
image_name: api
image_registry_host: registry.example.com
image_name_prefix: team
image_base: example/java:11
deploy_dir: /opt/app
staging_dir: build/deps
dependencies_file: deps.yaml
builder_command: [podman, build]
build_timeout_seconds: 600
hash_workers: 4
""",
    )

    config = load_config(tmp_path)

    assert config == DepstageConfig(
        image_name="api",
        image_registry_host="registry.example.com",
        image_name_prefix="team",
        image_base="example/java:11",
        deploy_dir="/opt/app",
        staging_dir="build/deps",
        dependencies_file="deps.yaml",
        builder_command=("podman", "build"),
        build_timeout_seconds=600,
        hash_workers=4,
    )
    assert config.dependency_image_name == "registry.example.com/team/api-dependencies"
    assert config.dependencies_path(tmp_path) == (tmp_path / "deps.yaml").resolve()


def test_explicit_missing_config_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path, tmp_path / "other.yaml")


@pytest.mark.parametrize(
    ("body", "message"),
    [
        pytest.param("- a\n", "must be a YAML mapping", id="not-mapping"),
        pytest.param("image_name: [x]\n", "image_name must be a string", id="name-type"),
        pytest.param("image_base: ''\n", "image_base must not be empty", id="empty-base"),
        pytest.param("deploy_dir: relative\n", "deploy_dir must be an absolute", id="relative-deploy"),
        pytest.param("builder_command: []\n", "builder_command", id="empty-command"),
        pytest.param("build_timeout_seconds: 0\n", "build_timeout_seconds", id="zero-timeout"),
        pytest.param("hash_workers: true\n", "hash_workers", id="bool-workers"),
        pytest.param("image_name: [\n", "Invalid YAML", id="bad-yaml"),
    ],
)
def test_load_config_rejects_invalid_values(tmp_path: Path, body: str, message: str) -> None:
    _write_config(tmp_path, body)

    with pytest.raises(ConfigError, match=message):
        load_config(tmp_path)


def test_validate_config_collects_all_errors(tmp_path: Path) -> None:
    _write_config(
        tmp_path,
        """
image_nmae: api
hash_workers: -1
builder_command: docker
deploy_dir: relative
""",
    )

    errors = validate_config_file(tmp_path)

    by_field = {error.field: error for error in errors}
    assert set(by_field) == {"image_nmae", "hash_workers", "builder_command", "deploy_dir"}
    assert by_field["image_nmae"].code == "CFG004"
    assert "image_name" in by_field["image_nmae"].hint
    assert by_field["hash_workers"].code == "CFG007"
    assert by_field["builder_command"].code == "CFG005"


def test_validate_config_accepts_null_timeout(tmp_path: Path) -> None:
    _write_config(tmp_path, "build_timeout_seconds: null\n")

    assert validate_config_file(tmp_path) == []


def test_preflight_reports_missing_root(tmp_path: Path) -> None:
    errors = preflight_validate(tmp_path / "missing")

    assert [error.code for error in errors] == ["CFG010"]


def test_preflight_reports_missing_explicit_config(tmp_path: Path) -> None:
    errors = preflight_validate(tmp_path, tmp_path / "nope.yaml")

    assert [error.code for error in errors] == ["CFG001"]
