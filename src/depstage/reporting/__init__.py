"""Terminal reporting for build results."""

from .stdout import StdoutReporter

__all__ = ["StdoutReporter"]
