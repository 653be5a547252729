"""File-level helpers for hashing."""

from __future__ import annotations

import hashlib
from pathlib import Path

from depstage.constants.build import FILE_HASH_CHUNK_SIZE


def file_sha1(path: Path) -> str:
    """Return SHA-1 hex digest for a file."""
    digest = hashlib.sha1()
    with path.open("rb") as handle:
        for chunk in iter(lambda: handle.read(FILE_HASH_CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()
