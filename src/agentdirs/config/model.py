"""Config data model for agent resolution."""

from __future__ import annotations

from dataclasses import dataclass

from agentdirs.constants.config import (
    DEFAULT_AUTO_DETECT,
    DEFAULT_DEFAULT_AGENTS,
    DEFAULT_TARGET_AGENTS,
)


@dataclass(frozen=True)
class AgentDirsConfig:
    """Resolved agent selection inputs."""

    target_agents: str = DEFAULT_TARGET_AGENTS
    auto_detect: bool = DEFAULT_AUTO_DETECT
    default_agents: str = DEFAULT_DEFAULT_AGENTS
