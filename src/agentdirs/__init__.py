"""Agentdirs package."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version

from agentdirs.paths import mcp_directory, mcp_file_path, mcp_root_key, skills_path
from agentdirs.registry import KNOWN_AGENTS, get_agent_definition, is_known_agent, known_agent_names
from agentdirs.resolution import detect_agents, parse_agent_list, resolve_agents, resolve_agents_from_config
from agentdirs.types.agents import AgentDefinition

__all__ = [
    "KNOWN_AGENTS",
    "AgentDefinition",
    "__version__",
    "detect_agents",
    "get_agent_definition",
    "is_known_agent",
    "known_agent_names",
    "mcp_directory",
    "mcp_file_path",
    "mcp_root_key",
    "parse_agent_list",
    "resolve_agents",
    "resolve_agents_from_config",
    "skills_path",
]

try:
    __version__ = version("agentdirs")
except PackageNotFoundError:
    __version__ = "0.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
