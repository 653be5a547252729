"""Cache record loading, comparison, and persistence."""

from __future__ import annotations

from depstage.cache.record import (
    fingerprint_changed,
    load_cache_record,
    save_cache_record,
    should_rebuild,
)

__all__ = ["fingerprint_changed", "load_cache_record", "save_cache_record", "should_rebuild"]
