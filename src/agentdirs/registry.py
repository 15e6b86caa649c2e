"""Registry of known coding agents and their directory conventions."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from agentdirs.constants.agents import (
    CLAUDE_AGENT,
    COPILOT_AGENT,
    CURSOR_AGENT,
    MCP_JSON_FILENAME,
    MCP_ROOT_KEY_MCP_SERVERS,
    MCP_ROOT_KEY_SERVERS,
    ROO_AGENT,
)
from agentdirs.types.agents import AgentDefinition

_DEFINITIONS: tuple[AgentDefinition, ...] = (
    AgentDefinition(
        name=COPILOT_AGENT,
        detection_dir=".github",
        skills_subpath=".github/skills",
        mcp_subpath=".vscode",
        mcp_file_name=MCP_JSON_FILENAME,
        mcp_root_key=MCP_ROOT_KEY_SERVERS,
    ),
    AgentDefinition(
        name=CLAUDE_AGENT,
        detection_dir=".claude",
        skills_subpath=".claude/skills",
        mcp_subpath=".claude",
        mcp_file_name=MCP_JSON_FILENAME,
        mcp_root_key=MCP_ROOT_KEY_MCP_SERVERS,
    ),
    AgentDefinition(
        name=CURSOR_AGENT,
        detection_dir=".cursor",
        skills_subpath=".cursor/rules",
        mcp_subpath=".cursor",
        mcp_file_name=MCP_JSON_FILENAME,
        mcp_root_key=MCP_ROOT_KEY_MCP_SERVERS,
    ),
    AgentDefinition(
        name=ROO_AGENT,
        detection_dir=".roo",
        skills_subpath=".roo/rules",
        mcp_subpath=".roo",
        mcp_file_name=MCP_JSON_FILENAME,
        mcp_root_key=MCP_ROOT_KEY_MCP_SERVERS,
    ),
)

KNOWN_AGENTS: Mapping[str, AgentDefinition] = MappingProxyType(
    {definition.name.lower(): definition for definition in _DEFINITIONS}
)


def get_agent_definition(agent: str) -> AgentDefinition | None:
    """Return the definition for *agent* (case-insensitive), or ``None`` if unknown."""
    return KNOWN_AGENTS.get(agent.lower())


def is_known_agent(agent: str) -> bool:
    """Return True if *agent* names a registry entry."""
    return get_agent_definition(agent) is not None


def known_agent_names() -> tuple[str, ...]:
    """Return known agent identifiers in registry order."""
    return tuple(KNOWN_AGENTS)
