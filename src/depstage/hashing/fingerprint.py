"""Content fingerprints for single files and whole dependency sets.

The aggregate fingerprint is a hash of hashes: per-file SHA-1 hex digests are
sorted, concatenated, and hashed again. Sorting erases enumeration order, so
the same set of files always yields the same value no matter how it was
resolved or how many workers hashed it.
"""

from __future__ import annotations

import hashlib
import logging
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from depstage.exceptions import HashError
from depstage.io import file_sha1
from depstage.types import Fingerprint

logger = logging.getLogger(__name__)


def file_fingerprint(path: Path) -> Fingerprint:
    """Return the SHA-1 hex fingerprint of one file's content."""
    try:
        return file_sha1(path)
    except OSError as exc:
        raise HashError(f"Failed to fingerprint {path}: {exc}") from exc


def aggregate_fingerprint(fingerprints: Iterable[Fingerprint]) -> Fingerprint:
    """Return an order-independent fingerprint over a collection of fingerprints."""
    blob = "".join(sorted(fp.lower() for fp in fingerprints))
    return hashlib.sha1(blob.encode("utf-8")).hexdigest()


def fingerprint_files(paths: list[Path], *, workers: int = 1) -> list[Fingerprint]:
    """Fingerprint ``paths``, optionally across a thread pool."""
    if workers <= 1 or len(paths) <= 1:
        return [file_fingerprint(path) for path in paths]
    logger.debug("Fingerprinting %d files with %d workers", len(paths), workers)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(file_fingerprint, paths))
