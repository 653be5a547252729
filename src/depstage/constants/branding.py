"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "DEPSTAGE"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ DEPSTAGE",
    "     // cached dependency images",
)
BUILD_SUMMARY_TITLE: str = "Dependency image"
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} dependency image builder"))
