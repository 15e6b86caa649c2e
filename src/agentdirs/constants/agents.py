"""Constants for agent conventions and agent-list parsing."""

from __future__ import annotations

import re
from re import Pattern

COPILOT_AGENT: str = "copilot"
CLAUDE_AGENT: str = "claude"
CURSOR_AGENT: str = "cursor"
ROO_AGENT: str = "roo"

# Returned when no explicit, detected or default agents are available.
# Kept as a literal: reordering the registry must not change it.
FALLBACK_AGENT: str = COPILOT_AGENT

MCP_JSON_FILENAME: str = "mcp.json"
MCP_ROOT_KEY_SERVERS: str = "servers"
MCP_ROOT_KEY_MCP_SERVERS: str = "mcpServers"

UNKNOWN_AGENT_SKILLS_DIRNAME: str = "skills"
UNKNOWN_AGENT_MCP_FILENAME: str = MCP_JSON_FILENAME
UNKNOWN_AGENT_MCP_ROOT_KEY: str = MCP_ROOT_KEY_SERVERS

AGENT_LIST_SPLIT_PATTERN: Pattern[str] = re.compile(r"[;,]")
AGENT_LIST_JOINER: str = ";"
