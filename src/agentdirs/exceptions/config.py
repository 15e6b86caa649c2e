"""Configuration-related exceptions."""

from __future__ import annotations

from agentdirs.exceptions.base import AgentDirsError


class ConfigError(AgentDirsError, ValueError):
    """Raised when agent configuration is invalid."""
