"""Typed report rows emitted by the CLI."""

from __future__ import annotations

from typing import TypedDict


class AgentReportEntry(TypedDict):
    """JSON-serializable locations for one agent."""

    agent: str
    known: bool
    skills_path: str
    mcp_directory: str
    mcp_file_path: str
    mcp_root_key: str
