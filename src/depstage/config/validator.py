"""Config file validation for depstage builds."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from depstage.constants.config import CONFIG_FILENAME
from depstage.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG007,
    CFG010,
    NON_EMPTY_STRING_KEYS,
    STRING_KEYS,
)
from depstage.exceptions.validation import ValidationError, sort_errors


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate a depstage.yaml file and return all validation errors.

    This is the collect-all entry point used by both ``depstage validate-config``
    and the ``build``/``stage`` preflight. It never raises; all problems are
    returned as :class:`ValidationError` instances.
    """
    errors: list[ValidationError] = []
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    path_str = str(path)

    if not path.exists():
        if config_explicit:
            errors.append(
                ValidationError(
                    code=CFG001,
                    path=path_str,
                    field="",
                    message=f"config file not found: {path}",
                )
            )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        errors.append(
            ValidationError(
                code=CFG002,
                path=path_str,
                field="",
                message=f"invalid YAML: {exc}",
            )
        )
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(str(k) for k in raw):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=key,
                    message=f"unknown key `{key}`",
                    hint=_suggest_key(key, ALLOWED_CONFIG_KEYS),
                )
            )

    for key in STRING_KEYS:
        if key not in raw:
            continue
        val = raw[key]
        if not isinstance(val, str):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=key,
                    message=f"invalid type for `{key}`",
                    hint="expected a string",
                )
            )
        elif key in NON_EMPTY_STRING_KEYS and not val.strip():
            errors.append(
                ValidationError(
                    code=CFG007,
                    path=path_str,
                    field=key,
                    message=f"`{key}` must not be empty",
                )
            )

    deploy_dir = raw.get("deploy_dir")
    if isinstance(deploy_dir, str) and deploy_dir.strip() and not deploy_dir.strip().startswith("/"):
        errors.append(
            ValidationError(
                code=CFG007,
                path=path_str,
                field="deploy_dir",
                message="`deploy_dir` must be an absolute path inside the image",
                hint=f"got: {deploy_dir!r}",
            )
        )

    if "builder_command" in raw:
        val = raw["builder_command"]
        if not isinstance(val, (list, tuple)) or not all(isinstance(part, str) for part in val):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field="builder_command",
                    message="invalid type for `builder_command`",
                    hint="expected a list of strings",
                )
            )
        elif not val or not all(part.strip() for part in val):
            errors.append(
                ValidationError(
                    code=CFG007,
                    path=path_str,
                    field="builder_command",
                    message="`builder_command` must be a non-empty list of non-blank strings",
                )
            )

    _validate_positive_int(raw, "hash_workers", path_str, errors, nullable=False)
    _validate_positive_int(raw, "build_timeout_seconds", path_str, errors, nullable=True)

    return errors


def preflight_validate(root: Path, config_path: Path | None = None) -> list[ValidationError]:
    """Run all preflight validation checks and return errors in deterministic order.

    Returns an empty list when everything is valid.
    """
    resolved_root = root.resolve()
    if not resolved_root.is_dir():
        return [
            ValidationError(
                code=CFG010,
                path=str(resolved_root),
                field="",
                message=f"root directory does not exist: {resolved_root}",
            )
        ]
    errors = validate_config_file(root, config_path, config_explicit=config_path is not None)
    return sort_errors(errors)


def _validate_positive_int(
    raw: dict[str, Any],
    key: str,
    path_str: str,
    errors: list[ValidationError],
    *,
    nullable: bool,
) -> None:
    """Validate an optional positive integer key."""
    if key not in raw:
        return
    val = raw[key]
    if val is None and nullable:
        return
    if isinstance(val, bool) or not isinstance(val, int):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field=key,
                message=f"invalid type for `{key}`",
                hint="expected a positive integer" + (" or null" if nullable else ""),
            )
        )
    elif val <= 0:
        errors.append(
            ValidationError(
                code=CFG007,
                path=path_str,
                field=key,
                message=f"`{key}` must be a positive integer, got {val}",
            )
        )


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
