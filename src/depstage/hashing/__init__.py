"""File and file-set fingerprinting."""

from __future__ import annotations

from depstage.hashing.fingerprint import aggregate_fingerprint, file_fingerprint, fingerprint_files

__all__ = ["aggregate_fingerprint", "file_fingerprint", "fingerprint_files"]
