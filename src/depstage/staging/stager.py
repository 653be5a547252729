"""Copy declared dependencies into a staging directory and drop stale ones."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from depstage.exceptions import StagingError
from depstage.model import DependencyEntry, StagedFile

logger = logging.getLogger(__name__)


def stage(entries: list[DependencyEntry], root: Path) -> list[StagedFile]:
    """Copy every entry under ``root`` and remove files no longer declared.

    Stale files are removed before copying so that a path which changed
    between a file and a directory does not block the new layout. Files are
    always overwritten. After the pass, the files under ``root`` are exactly
    the destinations of ``entries``.
    """
    root = root.resolve()
    try:
        root.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise StagingError(f"Failed to create staging directory {root}: {exc}") from exc

    staged = _plan(entries, root)

    stale = stale_files(root, staged)
    if stale:
        logger.info("Removing %d stale staged file(s) from %s", len(stale), root)
    remove_stale(root, stale)

    for entry, item in zip(entries, staged, strict=True):
        target = item.absolute_path
        try:
            if target.is_dir() and not target.is_symlink():
                shutil.rmtree(target)
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(entry.source_path, target)
        except OSError as exc:
            raise StagingError(f"Failed to stage {entry.source_path} -> {target}: {exc}") from exc
    logger.debug("Staged %d dependency file(s) into %s", len(staged), root)
    return staged


def stale_files(root: Path, staged: list[StagedFile]) -> set[Path]:
    """Return files present under ``root`` that are not part of ``staged``."""
    present = {path for path in root.rglob("*") if path.is_file() or path.is_symlink()}
    return present - {item.absolute_path for item in staged}


def remove_stale(root: Path, stale: set[Path]) -> None:
    """Delete ``stale`` files and prune directories they leave empty under ``root``."""
    for path in sorted(stale):
        try:
            path.unlink(missing_ok=True)
            _prune_empty_parents(path.parent, root)
        except OSError as exc:
            raise StagingError(f"Failed to remove stale file {path}: {exc}") from exc
        logger.debug("Removed stale file %s", path)


def _plan(entries: list[DependencyEntry], root: Path) -> list[StagedFile]:
    staged: list[StagedFile] = []
    seen: set[Path] = set()
    for entry in entries:
        target = _destination_path(root, entry.destination)
        if target in seen:
            raise StagingError(f"Duplicate staging destination: {entry.destination}")
        seen.add(target)
        staged.append(StagedFile(absolute_path=target))

    for target in seen:
        for parent in target.parents:
            if parent == root:
                break
            if parent in seen:
                raise StagingError(
                    f"Staging destination {target.relative_to(root)} is nested under "
                    f"another destination {parent.relative_to(root)}"
                )
    return staged


def _prune_empty_parents(directory: Path, root: Path) -> None:
    while directory != root and root in directory.parents:
        if any(directory.iterdir()):
            return
        directory.rmdir()
        directory = directory.parent


def _destination_path(root: Path, destination: str) -> Path:
    target = (root / destination).resolve()
    if target == root or root not in target.parents:
        raise StagingError(f"Staging destination escapes {root}: {destination!r}")
    return target
