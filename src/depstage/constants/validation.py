"""Stable validation error codes and allowed-key sets for config validation."""

from __future__ import annotations

CFG001: str = "CFG001"  # config file not found (explicit --config)
CFG002: str = "CFG002"  # invalid YAML parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown top-level key
CFG005: str = "CFG005"  # invalid value type
CFG007: str = "CFG007"  # value out of range
CFG010: str = "CFG010"  # root directory not found

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "image_name",
        "image_registry_host",
        "image_name_prefix",
        "image_base",
        "deploy_dir",
        "staging_dir",
        "dependencies_file",
        "builder_command",
        "build_timeout_seconds",
        "hash_workers",
    }
)

STRING_KEYS: tuple[str, ...] = (
    "image_name",
    "image_registry_host",
    "image_name_prefix",
    "image_base",
    "deploy_dir",
    "staging_dir",
    "dependencies_file",
)

# Keys whose string value may not be blank.
NON_EMPTY_STRING_KEYS: frozenset[str] = frozenset(
    {"image_name", "image_base", "deploy_dir", "staging_dir", "dependencies_file"}
)
