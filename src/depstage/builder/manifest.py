"""Build manifest (Dockerfile) generation for the dependency image."""

from __future__ import annotations

from pathlib import Path, PurePosixPath

from depstage.model import BuildContext


def render_manifest(context: BuildContext) -> str:
    """Render the manifest naming the base image and the lib directory copy."""
    deploy_dir = PurePosixPath(context.deploy_dir)
    lib = context.lib_dir_name
    return "\n".join(
        (
            f"FROM {context.base_image}",
            "",
            f"WORKDIR {deploy_dir}",
            "",
            f"COPY {lib} {lib}",
            "",
        )
    )


def write_manifest(context: BuildContext) -> Path:
    """Write the manifest into the build context and return its path."""
    path = context.manifest_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_manifest(context), encoding="utf-8")
    return path
