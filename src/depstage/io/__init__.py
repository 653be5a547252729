"""Shared file I/O helpers."""

from .files import file_sha1
from .text_io import write_text_atomic

__all__ = ["file_sha1", "write_text_atomic"]
