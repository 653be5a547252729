"""Human-readable stdout summary for build results."""

from __future__ import annotations

from depstage.constants.branding import ASCII_LOGO_LINES, BUILD_SUMMARY_TITLE
from depstage.constants.reporting import ANSI_BOLD, ANSI_DIM, ANSI_GREEN, ANSI_RESET, ANSI_YELLOW
from depstage.model import BuildResult


def _colorize(text: str, color: str, enabled: bool) -> str:
    return f"{color}{text}{ANSI_RESET}" if enabled else text


class StdoutReporter:
    """Formats a build result as a short block of terminal output."""

    def __init__(self, result: BuildResult, *, color: bool = True, verbose: bool = False) -> None:
        self._result = result
        self._color = color
        self._verbose = verbose

    def render(self) -> str:
        """Render the full stdout report as a single string."""
        r = self._result
        sep = "  " + "─" * 38
        lines = [_colorize(line, ANSI_BOLD, self._color) for line in ASCII_LOGO_LINES]
        lines.extend(
            (
                "",
                f"  {BUILD_SUMMARY_TITLE}",
                sep,
                f"  Status       {self._status()}",
                f"  Image        {r.image_name}",
                f"  Reference    {r.image_reference}",
                f"  Fingerprint  {r.fingerprint}",
                f"  Staged files {r.staged_files}",
            )
        )
        if self._verbose:
            lines.append(f"  Previous     {r.previous_fingerprint or '<none>'}")
            lines.append(f"  State        {r.state}")
            lines.append(f"  Duration     {r.duration_seconds:.2f}s")
        for warning in r.warnings:
            lines.append(_colorize(f"  warning: {warning}", ANSI_YELLOW, self._color))
        lines.append(sep)
        return "\n".join(lines)

    def _status(self) -> str:
        r = self._result
        if r.cache_hit:
            return _colorize("cache hit, build skipped", ANSI_GREEN, self._color)
        if r.dry_run:
            return _colorize("cache miss, rebuild needed", ANSI_YELLOW, self._color)
        if r.rebuilt:
            return _colorize("cache miss, image rebuilt", ANSI_GREEN, self._color)
        return _colorize(r.state, ANSI_DIM, self._color)
