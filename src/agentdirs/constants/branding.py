"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "AGENTDIRS"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ AGENTDIRS",
    "     // skill and MCP locations for coding agents",
)
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} agent resolver"))
