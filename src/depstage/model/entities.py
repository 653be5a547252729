"""Entity dataclasses shared across staging, building, and reporting."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from depstage.constants.build import LIB_DIR_NAME, MANIFEST_FILENAME
from depstage.constants.config import DEFAULT_DEPLOY_DIR
from depstage.types import BuildState, Fingerprint


@dataclass(frozen=True)
class DependencyEntry:
    """A resolved dependency artifact and its path relative to the staging lib directory."""

    source_path: Path
    destination: str


@dataclass(frozen=True)
class StagedFile:
    """A dependency file that exists inside the staging tree after a staging pass."""

    absolute_path: Path


@dataclass(frozen=True)
class BuildContext:
    """Directory handed to the image builder, plus what goes into its manifest."""

    directory: Path
    base_image: str
    deploy_dir: str = DEFAULT_DEPLOY_DIR
    lib_dir_name: str = LIB_DIR_NAME
    manifest_name: str = MANIFEST_FILENAME

    @property
    def manifest_path(self) -> Path:
        return self.directory / self.manifest_name


@dataclass(frozen=True)
class ImageTags:
    """Stable and fingerprint-qualified tags for one built image."""

    stable: str
    qualified: str

    @classmethod
    def for_fingerprint(cls, image_name: str, fingerprint: Fingerprint) -> ImageTags:
        return cls(stable=image_name, qualified=f"{image_name}:{fingerprint}")

    def as_tuple(self) -> tuple[str, str]:
        return (self.stable, self.qualified)


@dataclass(frozen=True)
class BuildResult:
    """Outcome of one dependency image run."""

    fingerprint: Fingerprint
    previous_fingerprint: Fingerprint | None
    image_name: str
    tags: ImageTags
    rebuilt: bool
    state: BuildState
    staged_files: int
    duration_seconds: float
    dry_run: bool = False
    warnings: tuple[str, ...] = ()

    @property
    def cache_hit(self) -> bool:
        return self.state == "CACHE_HIT"

    @property
    def image_reference(self) -> str:
        """Fingerprint-qualified image reference, usable as a base for downstream images."""
        return self.tags.qualified
