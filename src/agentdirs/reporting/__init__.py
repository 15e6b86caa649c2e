"""Report builders and renderers for resolved agent locations."""

from .report import build_agent_report, render_json, render_text

__all__ = ["build_agent_report", "render_json", "render_text"]
