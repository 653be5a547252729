"""Shared pytest fixtures for dependency staging tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from depstage.builder import ImageBuilder
from depstage.model import DependencyEntry


class RecordingRunner:
    """Process runner stand-in that records argv and returns a fixed exit code."""

    def __init__(self, exit_code: int = 0) -> None:
        self.exit_code = exit_code
        self.calls: list[list[str]] = []

    def __call__(self, command: list[str], **kwargs: Any) -> int:
        self.calls.append(list(command))
        return self.exit_code

    def tags(self, call: int = -1) -> list[str]:
        argv = self.calls[call]
        return [argv[i + 1] for i, part in enumerate(argv) if part == "--tag"]


@pytest.fixture()
def artifacts_dir(tmp_path: Path) -> Path:
    """Return a directory holding source artifacts outside the staging tree."""
    path = tmp_path / "artifacts"
    path.mkdir()
    return path


@pytest.fixture()
def make_artifact(artifacts_dir: Path) -> Callable[[str, bytes], DependencyEntry]:
    """Return a factory writing an artifact and returning its dependency entry."""

    def _make(name: str, content: bytes) -> DependencyEntry:
        source = artifacts_dir / name
        source.parent.mkdir(parents=True, exist_ok=True)
        source.write_bytes(content)
        return DependencyEntry(source_path=source, destination=name)

    return _make


@pytest.fixture()
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture()
def builder(runner: RecordingRunner) -> ImageBuilder:
    return ImageBuilder(("docker", "build"), runner=runner)
