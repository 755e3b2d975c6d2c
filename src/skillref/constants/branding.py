"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "SKILLREF"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ SKILLREF",
    "     // plugin-qualified skill references",
)
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} skill reference resolver"))
