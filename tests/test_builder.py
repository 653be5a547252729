"""Tests for manifest generation and the external builder process."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

from depstage.builder import ImageBuilder, render_manifest, run_process, spawn, write_manifest
from depstage.exceptions import BuildError
from depstage.model import BuildContext, ImageTags


def _python_builder(script: str) -> tuple[str, ...]:
    return (sys.executable, "-c", script)


@pytest.fixture()
def context(tmp_path: Path) -> BuildContext:
    directory = tmp_path / "context"
    (directory / "lib").mkdir(parents=True)
    return BuildContext(directory=directory, base_image="example/java:8")


def test_render_manifest_names_base_image_and_lib_copy(context: BuildContext) -> None:
    rendered = render_manifest(context)

    assert rendered.splitlines() == [
        "FROM example/java:8",
        "",
        "WORKDIR /local/deploy",
        "",
        "COPY lib lib",
    ]


def test_write_manifest_regenerates_file(context: BuildContext) -> None:
    context.manifest_path.write_text("stale", encoding="utf-8")

    path = write_manifest(context)

    assert path == context.directory / "Dockerfile"
    assert path.read_text(encoding="utf-8").startswith("FROM example/java:8")


def test_build_command_places_context_before_tags(context: BuildContext) -> None:
    builder = ImageBuilder(("docker", "build"))
    tags = ImageTags.for_fingerprint("app-dependencies", "abc")

    argv = builder.build_command(context, tags)

    assert argv == [
        "docker",
        "build",
        str(context.directory),
        "--tag",
        "app-dependencies",
        "--tag",
        "app-dependencies:abc",
    ]


def test_build_runs_real_process_with_tags(context: BuildContext) -> None:
    script = (
        "import pathlib, sys; "
        "pathlib.Path(sys.argv[1], 'argv.txt').write_text('\\n'.join(sys.argv[1:]))"
    )
    builder = ImageBuilder(_python_builder(script))

    builder.build(context, ImageTags.for_fingerprint("app-dependencies", "abc"))

    recorded = (context.directory / "argv.txt").read_text().splitlines()
    assert recorded == [str(context.directory), "--tag", "app-dependencies", "--tag", "app-dependencies:abc"]
    assert context.manifest_path.is_file()


def test_build_nonzero_exit_raises_build_error(context: BuildContext) -> None:
    builder = ImageBuilder(_python_builder("import sys; sys.exit(3)"))

    with pytest.raises(BuildError) as excinfo:
        builder.build(context, ImageTags.for_fingerprint("app-dependencies", "abc"))

    assert excinfo.value.kind == "exit"
    assert excinfo.value.exit_code == 3
    assert "app-dependencies:abc" in excinfo.value.command_line


def test_build_missing_executable_raises_launch_error(context: BuildContext) -> None:
    builder = ImageBuilder(("depstage-no-such-builder-executable", "build"))

    with pytest.raises(BuildError) as excinfo:
        builder.build(context, ImageTags.for_fingerprint("app-dependencies", "abc"))

    assert excinfo.value.kind == "launch"
    assert excinfo.value.exit_code is None
    assert context.manifest_path.is_file()


def test_run_process_times_out_and_stops_child(tmp_path: Path) -> None:
    with pytest.raises(BuildError) as excinfo:
        run_process(_python_builder("import time; time.sleep(30)"), cwd=tmp_path, timeout=0.5)

    assert excinfo.value.kind == "timeout"


def test_run_process_streams_output_to_logger(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    script = "import sys; print('step 1/2'); print('oops', file=sys.stderr)"

    with caplog.at_level(logging.INFO, logger="depstage.builder.process"):
        exit_code = run_process(_python_builder(script), cwd=tmp_path)

    assert exit_code == 0
    assert "step 1/2" in caplog.messages
    assert "oops" in caplog.messages


def test_spawn_kills_child_when_block_raises(tmp_path: Path) -> None:
    with pytest.raises(RuntimeError):
        with spawn(_python_builder("import time; time.sleep(30)"), cwd=tmp_path) as process:
            raise RuntimeError("orchestration failed")

    assert process.poll() is not None


def test_empty_builder_command_is_rejected() -> None:
    with pytest.raises(ValueError):
        ImageBuilder(())
