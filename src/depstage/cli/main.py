"""CLI entrypoint for depstage."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from depstage import __version__
from depstage.config import preflight_validate
from depstage.constants.branding import CLI_DESCRIPTION
from depstage.exceptions import BuildError, ConfigError, DepstageError
from depstage.exceptions.validation import format_errors
from depstage.pipeline import build_project
from depstage.reporting import StdoutReporter


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="depstage",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    build = subparsers.add_parser("build", help="Stage dependencies and build the dependency image if it changed")
    _add_project_arguments(build)
    build.add_argument("--force", action="store_true", help="Rebuild even when the fingerprint is unchanged")

    stage = subparsers.add_parser("stage", help="Stage and fingerprint dependencies without building")
    _add_project_arguments(stage)

    validate = subparsers.add_parser("validate-config", help="Validate configuration without building")
    validate.add_argument("-r", "--root", type=Path, required=True, help="Project root path")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")

    return parser


def _add_project_arguments(sub: argparse.ArgumentParser) -> None:
    sub.add_argument("-r", "--root", type=Path, required=True, help="Project root path")
    sub.add_argument("-c", "--config", type=Path, help="Explicit config file")
    deps = sub.add_mutually_exclusive_group()
    deps.add_argument(
        "-d",
        "--dependencies",
        type=Path,
        default=None,
        help="Dependency manifest (defaults to dependencies_file from config)",
    )
    deps.add_argument(
        "--from-dir",
        type=Path,
        default=None,
        help="Stage every *.jar in this directory instead of reading a manifest",
    )
    sub.add_argument("-n", "--image-name", default=None, help="Override image_name from config")
    sub.add_argument("-b", "--image-base", default=None, help="Override image_base from config")
    sub.add_argument("-t", "--timeout", type=int, default=None, help="Builder timeout in seconds")
    sub.add_argument("-w", "--workers", type=int, default=None, help="Threads used to fingerprint files")
    sub.add_argument("-q", "--quiet", action="store_true", help="Silence the stdout summary")
    sub.add_argument("--no-color", action="store_true", help="Disable colored output")
    sub.add_argument("-v", "--verbose", action="store_true", help="Show debug logging and extra summary fields")


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if getattr(args, "verbose", False) else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    if args.command == "validate-config":
        return _handle_validate_config(args)

    if args.command not in ("build", "stage"):
        parser.error(f"Unsupported command: {args.command}")

    for flag, value in (("--timeout", args.timeout), ("--workers", args.workers)):
        if value is not None and value <= 0:
            print(f"Configuration error: {flag} must be a positive integer", file=sys.stderr)
            return 2

    validation_errors = preflight_validate(args.root, args.config)
    if validation_errors:
        print(format_errors(validation_errors), file=sys.stderr)
        return 2

    try:
        result = build_project(
            root=args.root,
            config_path=args.config,
            dependencies_path=args.dependencies,
            from_dir=args.from_dir,
            image_name=args.image_name,
            image_base=args.image_base,
            timeout_seconds=args.timeout,
            hash_workers=args.workers,
            force=getattr(args, "force", False),
            dry_run=args.command == "stage",
        )
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except BuildError as exc:
        print(f"Build error: {exc}", file=sys.stderr)
        return 1
    except DepstageError as exc:
        print(f"{_error_label(exc)} error: {exc}", file=sys.stderr)
        return 1

    if not args.quiet:
        use_color = not args.no_color and sys.stdout.isatty()
        print(StdoutReporter(result, color=use_color, verbose=args.verbose).render())

    return 0


def _handle_validate_config(args: argparse.Namespace) -> int:
    """Run config validation and report results."""
    errors = preflight_validate(args.root, args.config)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0


def _error_label(exc: DepstageError) -> str:
    """Render ``ResolutionError`` as ``Resolution`` and so on."""
    name = type(exc).__name__
    return name.removesuffix("Error") or "Depstage"


if __name__ == "__main__":
    raise SystemExit(main())
