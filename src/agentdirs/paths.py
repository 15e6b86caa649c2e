"""Path accessors for agent skills and MCP configuration locations.

None of these functions touch the filesystem. Identifiers missing from the
registry fall back to a ``.<agent>`` directory convention instead of failing.
"""

from __future__ import annotations

from pathlib import Path

from agentdirs.constants.agents import (
    UNKNOWN_AGENT_MCP_FILENAME,
    UNKNOWN_AGENT_MCP_ROOT_KEY,
    UNKNOWN_AGENT_SKILLS_DIRNAME,
)
from agentdirs.registry import get_agent_definition


def skills_path(project_dir: Path | str, agent: str) -> Path:
    """Return the directory holding *agent*'s skill files."""
    definition = get_agent_definition(agent)
    if definition is not None:
        return Path(project_dir) / definition.skills_subpath
    return _convention_dir(project_dir, agent) / UNKNOWN_AGENT_SKILLS_DIRNAME


def mcp_file_path(project_dir: Path | str, agent: str) -> Path:
    """Return the MCP config file path for *agent*."""
    definition = get_agent_definition(agent)
    if definition is not None:
        return Path(project_dir) / definition.mcp_subpath / definition.mcp_file_name
    return _convention_dir(project_dir, agent) / UNKNOWN_AGENT_MCP_FILENAME


def mcp_directory(project_dir: Path | str, agent: str) -> Path:
    """Return the directory containing *agent*'s MCP config file."""
    definition = get_agent_definition(agent)
    if definition is not None:
        return Path(project_dir) / definition.mcp_subpath
    return _convention_dir(project_dir, agent)


def mcp_root_key(agent: str) -> str:
    """Return the top-level JSON key that holds MCP servers for *agent*."""
    definition = get_agent_definition(agent)
    if definition is not None:
        return definition.mcp_root_key
    return UNKNOWN_AGENT_MCP_ROOT_KEY


def _convention_dir(project_dir: Path | str, agent: str) -> Path:
    # Identifier is used as given, without case normalization.
    return Path(project_dir) / f".{agent}"
