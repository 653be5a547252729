"""Persisted fingerprint of the last successful dependency image build."""

from __future__ import annotations

import logging
from pathlib import Path

from depstage.constants.build import CACHE_RECORD_TEMP_PREFIX, CACHE_RECORD_TEMP_SUFFIX
from depstage.exceptions import RecordWriteError
from depstage.io import write_text_atomic
from depstage.types import Fingerprint

logger = logging.getLogger(__name__)


def load_cache_record(path: Path) -> Fingerprint | None:
    """Return the recorded fingerprint, or ``None`` when no usable record exists."""
    if not path.is_file():
        return None
    try:
        value = path.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Ignoring unreadable cache record %s (%s)", path, exc)
        return None
    return value or None


def fingerprint_changed(current: Fingerprint, previous: Fingerprint | None) -> bool:
    """Return True when ``previous`` is absent or differs from ``current``."""
    return previous is None or previous != current


def should_rebuild(current: Fingerprint, record_path: Path) -> bool:
    """Return True when ``current`` differs from the recorded fingerprint or none is recorded."""
    return fingerprint_changed(current, load_cache_record(record_path))


def save_cache_record(path: Path, fingerprint: Fingerprint) -> None:
    """Persist ``fingerprint`` atomically."""
    try:
        write_text_atomic(
            path=path,
            content=fingerprint,
            temp_prefix=CACHE_RECORD_TEMP_PREFIX,
            temp_suffix=CACHE_RECORD_TEMP_SUFFIX,
        )
    except OSError as exc:
        raise RecordWriteError(f"Failed to write cache record {path}: {exc}") from exc
