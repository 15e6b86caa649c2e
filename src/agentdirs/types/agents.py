"""Typed agent convention records."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AgentDefinition:
    """Filesystem conventions of one coding agent.

    ``skills_subpath`` and ``mcp_subpath`` are relative to the project root and
    use ``/`` separators; they may span several directory levels.
    """

    name: str
    detection_dir: str
    skills_subpath: str
    mcp_subpath: str
    mcp_file_name: str
    mcp_root_key: str
