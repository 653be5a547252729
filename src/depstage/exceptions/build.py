"""Image build and cache record exceptions."""

from __future__ import annotations

from collections.abc import Sequence

from depstage.constants.build import BUILD_ERROR_KIND_EXIT
from depstage.exceptions.base import DepstageError
from depstage.types import BuildErrorKind


class BuildError(DepstageError):
    """Raised when the external image builder fails to launch, exits non-zero, or times out."""

    def __init__(
        self,
        message: str,
        *,
        command: Sequence[str],
        exit_code: int | None = None,
        kind: BuildErrorKind = BUILD_ERROR_KIND_EXIT,
    ) -> None:
        super().__init__(message)
        self.command = tuple(command)
        self.exit_code = exit_code
        self.kind = kind

    @property
    def command_line(self) -> str:
        """The invoked command rendered as a single line."""
        return " ".join(self.command)


class RecordWriteError(DepstageError):
    """Raised when the fingerprint of a successful build cannot be persisted."""
