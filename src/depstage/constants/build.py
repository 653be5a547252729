"""Constants for staging layout, fingerprinting, and image builds."""

from __future__ import annotations

from depstage.types import BuildErrorKind

LIB_DIR_NAME: str = "lib"
CACHE_RECORD_FILENAME: str = "dependencies.sha1"
CACHE_RECORD_TEMP_PREFIX: str = ".dependencies-"
CACHE_RECORD_TEMP_SUFFIX: str = ".tmp"
MANIFEST_FILENAME: str = "Dockerfile"
FILE_HASH_CHUNK_SIZE: int = 65536

DEPENDENCY_IMAGE_SUFFIX: str = "-dependencies"

# Grace period between terminate() and kill() when stopping a builder child.
PROCESS_KILL_GRACE_SECONDS: float = 5.0

BUILD_ERROR_KIND_EXIT: BuildErrorKind = "exit"
BUILD_ERROR_KIND_LAUNCH: BuildErrorKind = "launch"
BUILD_ERROR_KIND_TIMEOUT: BuildErrorKind = "timeout"
