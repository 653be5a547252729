"""Dependency image orchestration.

A run moves through STAGING, HASHING, then either CACHE_HIT (done) or
CACHE_MISS, BUILDING, RECORDING and DONE. Any fatal error ends the run by
propagating; the cache record is only written after a successful build.

One run owns its staging root. Callers must serialize runs that share one.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path

from depstage.builder import ImageBuilder, write_manifest
from depstage.cache import fingerprint_changed, load_cache_record, save_cache_record
from depstage.constants.build import CACHE_RECORD_FILENAME, LIB_DIR_NAME
from depstage.constants.config import DEFAULT_DEPLOY_DIR, DEFAULT_IMAGE_BASE
from depstage.exceptions import RecordWriteError, StagingError
from depstage.hashing import aggregate_fingerprint, fingerprint_files
from depstage.model import BuildContext, BuildResult, DependencyEntry, ImageTags
from depstage.staging import stage
from depstage.types import BuildState

logger = logging.getLogger(__name__)


def build_dependency_image(
    *,
    entries: list[DependencyEntry],
    staging_root: Path,
    image_name: str,
    builder: ImageBuilder,
    base_image: str = DEFAULT_IMAGE_BASE,
    deploy_dir: str = DEFAULT_DEPLOY_DIR,
    force: bool = False,
    hash_workers: int = 1,
    dry_run: bool = False,
) -> BuildResult:
    """Stage ``entries``, fingerprint them, and build the image unless the cache says it is current."""
    started_at = time.perf_counter()
    staging_root = staging_root.resolve()
    state: BuildState = "STAGING"
    _enter(state, staging_root)
    staged = stage(entries, staging_root / LIB_DIR_NAME)
    context = BuildContext(directory=staging_root, base_image=base_image, deploy_dir=deploy_dir)
    try:
        write_manifest(context)
    except OSError as exc:
        raise StagingError(f"Failed to write build manifest into {staging_root}: {exc}") from exc

    state = "HASHING"
    _enter(state, staging_root)
    fingerprint = aggregate_fingerprint(
        fingerprint_files([item.absolute_path for item in staged], workers=hash_workers)
    )

    record_path = staging_root / CACHE_RECORD_FILENAME
    previous = load_cache_record(record_path)
    tags = ImageTags.for_fingerprint(image_name, fingerprint)
    warnings: list[str] = []

    changed = fingerprint_changed(fingerprint, previous)
    if not changed and not force:
        state = "CACHE_HIT"
        logger.info("Dependency image unchanged (cache hit), skipping build of %s", tags.qualified)
        return _result(
            fingerprint=fingerprint,
            previous=previous,
            tags=tags,
            rebuilt=False,
            state=state,
            staged_files=len(staged),
            started_at=started_at,
            dry_run=dry_run,
            warnings=warnings,
        )

    state = "CACHE_MISS"
    if not changed:
        logger.info("Forcing rebuild of dependency image %s", tags.qualified)
    else:
        logger.info(
            "Dependency fingerprint changed (cache miss), rebuilding: %s -> %s",
            previous or "<none>",
            fingerprint,
        )

    if dry_run:
        return _result(
            fingerprint=fingerprint,
            previous=previous,
            tags=tags,
            rebuilt=False,
            state=state,
            staged_files=len(staged),
            started_at=started_at,
            dry_run=True,
            warnings=warnings,
        )

    state = "BUILDING"
    _enter(state, staging_root)
    builder.build(context, tags)

    state = "RECORDING"
    _enter(state, staging_root)
    try:
        save_cache_record(record_path, fingerprint)
    except RecordWriteError as exc:
        warning = f"{exc}; the next run will rebuild the dependency image"
        warnings.append(warning)
        logger.warning(warning)

    state = "DONE"
    return _result(
        fingerprint=fingerprint,
        previous=previous,
        tags=tags,
        rebuilt=True,
        state=state,
        staged_files=len(staged),
        started_at=started_at,
        dry_run=False,
        warnings=warnings,
    )


def _enter(state: BuildState, staging_root: Path) -> None:
    logger.debug("%s: %s", state, staging_root)


def _result(
    *,
    fingerprint: str,
    previous: str | None,
    tags: ImageTags,
    rebuilt: bool,
    state: BuildState,
    staged_files: int,
    started_at: float,
    dry_run: bool,
    warnings: list[str],
) -> BuildResult:
    return BuildResult(
        fingerprint=fingerprint,
        previous_fingerprint=previous,
        image_name=tags.stable,
        tags=tags,
        rebuilt=rebuilt,
        state=state,
        staged_files=staged_files,
        duration_seconds=time.perf_counter() - started_at,
        dry_run=dry_run,
        warnings=tuple(warnings),
    )
