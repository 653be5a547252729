"""Scoped child-process execution for the external image builder."""

from __future__ import annotations

import logging
import subprocess
import threading
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path
from typing import IO

from depstage.constants.build import (
    BUILD_ERROR_KIND_LAUNCH,
    BUILD_ERROR_KIND_TIMEOUT,
    PROCESS_KILL_GRACE_SECONDS,
)
from depstage.exceptions import BuildError

logger = logging.getLogger(__name__)


@contextmanager
def spawn(command: Sequence[str], *, cwd: Path) -> Iterator[subprocess.Popen[str]]:
    """Start ``command`` with merged output and guarantee it is reaped on exit.

    A child still running when the block exits (exception, timeout, interrupt)
    is terminated, then killed after a grace period.
    """
    argv = list(command)
    try:
        process = subprocess.Popen(  # noqa: S603
            argv,
            cwd=str(cwd),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            errors="replace",
            shell=False,
        )
    except OSError as exc:
        raise BuildError(
            f"Failed to launch {' '.join(argv)}: {exc}",
            command=argv,
            kind=BUILD_ERROR_KIND_LAUNCH,
        ) from exc

    try:
        yield process
    finally:
        if process.poll() is None:
            stop_process(process)
        if process.stdout is not None:
            process.stdout.close()


def stop_process(process: subprocess.Popen[str], grace_seconds: float = PROCESS_KILL_GRACE_SECONDS) -> None:
    """Terminate ``process``, escalating to kill if it ignores the request."""
    process.terminate()
    try:
        process.wait(timeout=grace_seconds)
    except subprocess.TimeoutExpired:
        logger.warning("Builder process %d ignored terminate; killing", process.pid)
        process.kill()
        process.wait()


def run_process(
    command: Sequence[str],
    *,
    cwd: Path,
    timeout: float | None = None,
    log: logging.Logger | None = None,
) -> int:
    """Run ``command`` to completion, streaming its output to ``log``; return the exit code."""
    sink = log or logger
    argv = list(command)
    with spawn(argv, cwd=cwd) as process:
        pump = threading.Thread(target=_pump_output, args=(process.stdout, sink), daemon=True)
        pump.start()
        try:
            return process.wait(timeout=timeout)
        except subprocess.TimeoutExpired as exc:
            stop_process(process)
            raise BuildError(
                f"Timed out after {timeout}s running {' '.join(argv)}",
                command=argv,
                exit_code=process.returncode,
                kind=BUILD_ERROR_KIND_TIMEOUT,
            ) from exc
        finally:
            pump.join(timeout=PROCESS_KILL_GRACE_SECONDS)


def _pump_output(stream: IO[str] | None, sink: logging.Logger) -> None:
    if stream is None:
        return
    try:
        for line in stream:
            text = line.rstrip()
            if text:
                sink.info("%s", text)
    except (OSError, ValueError) as exc:
        # Stream closed underneath us after the child was stopped.
        sink.debug("Stopped reading builder output: %s", exc)
