"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "agentdirs.yaml"

DEFAULT_TARGET_AGENTS: str = ""
DEFAULT_AUTO_DETECT: bool = True
DEFAULT_DEFAULT_AGENTS: str = ""

AGENT_LIST_CONFIG_KEYS: frozenset[str] = frozenset({"target_agents", "default_agents"})
ALLOWED_CONFIG_KEYS: frozenset[str] = AGENT_LIST_CONFIG_KEYS | {"auto_detect"}
