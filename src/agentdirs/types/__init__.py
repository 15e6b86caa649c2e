"""Shared type definitions for Agentdirs."""

from .agents import AgentDefinition
from .report import AgentReportEntry

__all__ = ["AgentDefinition", "AgentReportEntry"]
