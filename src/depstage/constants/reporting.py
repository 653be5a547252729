"""ANSI styling used by the stdout reporter."""

from __future__ import annotations

ANSI_RESET: str = "\033[0m"
ANSI_BOLD: str = "\033[1m"
ANSI_DIM: str = "\033[2m"
ANSI_GREEN: str = "\033[32m"
ANSI_YELLOW: str = "\033[33m"
