"""Shared exception hierarchy for Agentdirs."""

from __future__ import annotations

from .base import AgentDirsError
from .config import ConfigError

__all__ = ["AgentDirsError", "ConfigError"]
