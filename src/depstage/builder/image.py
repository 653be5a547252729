"""External image builder invocation."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TypeAlias

from depstage.builder.manifest import write_manifest
from depstage.builder.process import run_process
from depstage.constants.build import BUILD_ERROR_KIND_EXIT, BUILD_ERROR_KIND_LAUNCH
from depstage.constants.config import DEFAULT_BUILDER_COMMAND
from depstage.exceptions import BuildError
from depstage.model import BuildContext, ImageTags

logger = logging.getLogger(__name__)

ProcessRunner: TypeAlias = Callable[..., int]


class ImageBuilder:
    """Builds an image from a context directory with a configurable builder command.

    The command is invoked as ``<command...> <context> --tag <stable> --tag <qualified>``
    and only its exit status is interpreted.
    """

    def __init__(
        self,
        command: Sequence[str] = DEFAULT_BUILDER_COMMAND,
        *,
        timeout_seconds: float | None = None,
        runner: ProcessRunner = run_process,
    ) -> None:
        if not command:
            raise ValueError("builder command must not be empty")
        self.command = tuple(command)
        self.timeout_seconds = timeout_seconds
        self._runner = runner

    def build_command(self, context: BuildContext, tags: ImageTags) -> list[str]:
        """Return the full argv for building ``context`` with ``tags``."""
        argv = [*self.command, str(context.directory)]
        for tag in tags.as_tuple():
            argv.extend(("--tag", tag))
        return argv

    def build(self, context: BuildContext, tags: ImageTags) -> None:
        """Write the manifest and run the builder, raising ``BuildError`` on failure."""
        argv = self.build_command(context, tags)
        try:
            manifest_path = write_manifest(context)
        except OSError as exc:
            raise BuildError(
                f"Failed to write build manifest for {context.directory}: {exc}",
                command=argv,
                kind=BUILD_ERROR_KIND_LAUNCH,
            ) from exc
        logger.debug("Wrote build manifest %s", manifest_path)

        logger.info("Building dependency image %s . . .", tags.qualified)
        exit_code = self._runner(argv, cwd=Path(context.directory), timeout=self.timeout_seconds)
        if exit_code != 0:
            raise BuildError(
                f"Error running {' '.join(argv)} (exit code {exit_code})",
                command=argv,
                exit_code=exit_code,
                kind=BUILD_ERROR_KIND_EXIT,
            )
