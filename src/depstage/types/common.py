"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal, TypeAlias

Fingerprint: TypeAlias = str
BuildState: TypeAlias = Literal[
    "STAGING",
    "HASHING",
    "CACHE_HIT",
    "CACHE_MISS",
    "BUILDING",
    "RECORDING",
    "DONE",
]
BuildErrorKind: TypeAlias = Literal["exit", "launch", "timeout"]
