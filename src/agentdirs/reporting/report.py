"""Build and render per-agent location reports."""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path

from agentdirs.paths import mcp_directory, mcp_file_path, mcp_root_key, skills_path
from agentdirs.registry import is_known_agent
from agentdirs.types.report import AgentReportEntry


def build_agent_report(project_dir: Path, agents: Sequence[str]) -> list[AgentReportEntry]:
    """Collect skills and MCP locations for each agent, preserving order."""
    return [
        AgentReportEntry(
            agent=agent,
            known=is_known_agent(agent),
            skills_path=str(skills_path(project_dir, agent)),
            mcp_directory=str(mcp_directory(project_dir, agent)),
            mcp_file_path=str(mcp_file_path(project_dir, agent)),
            mcp_root_key=mcp_root_key(agent),
        )
        for agent in agents
    ]


def render_json(entries: Sequence[AgentReportEntry]) -> str:
    """Render report entries as a JSON array."""
    return json.dumps(list(entries), indent=2)


def render_text(entries: Sequence[AgentReportEntry]) -> str:
    """Render report entries as an aligned plain-text block."""
    lines: list[str] = []
    for entry in entries:
        suffix = "" if entry["known"] else " (unknown, using convention)"
        lines.append(f"{entry['agent']}{suffix}")
        lines.append(f"  skills:   {entry['skills_path']}")
        lines.append(f"  mcp file: {entry['mcp_file_path']}")
        lines.append(f"  mcp key:  {entry['mcp_root_key']}")
    return "\n".join(lines)
