"""Base exception for Agentdirs."""

from __future__ import annotations


class AgentDirsError(Exception):
    """Base class for all Agentdirs errors."""
