"""Configuration loading and normalization for agent resolution.

This package facade re-exports the public names so callers can use
``from agentdirs.config import ...``.
"""

from __future__ import annotations

from agentdirs.config.loader import load_config
from agentdirs.config.model import AgentDirsConfig

__all__ = [
    "AgentDirsConfig",
    "load_config",
]
