"""Tests for agent location reports."""

from __future__ import annotations

import json
from pathlib import Path

from agentdirs.reporting import build_agent_report, render_json, render_text


def test_build_agent_report_known_and_unknown(tmp_path: Path) -> None:
    entries = build_agent_report(tmp_path, ["copilot", "windsurf"])

    assert [entry["agent"] for entry in entries] == ["copilot", "windsurf"]
    assert entries[0]["known"] is True
    assert entries[0]["skills_path"] == str(tmp_path / ".github" / "skills")
    assert entries[0]["mcp_file_path"] == str(tmp_path / ".vscode" / "mcp.json")
    assert entries[0]["mcp_root_key"] == "servers"
    assert entries[1]["known"] is False
    assert entries[1]["mcp_directory"] == str(tmp_path / ".windsurf")


def test_render_json_round_trips_entries(tmp_path: Path) -> None:
    entries = build_agent_report(tmp_path, ["claude"])

    assert json.loads(render_json(entries)) == entries


def test_render_text_marks_unknown_agents(tmp_path: Path) -> None:
    text = render_text(build_agent_report(tmp_path, ["cursor", "windsurf"]))

    assert text.splitlines()[0] == "cursor"
    assert "windsurf (unknown, using convention)" in text
    assert f"  skills:   {tmp_path / '.cursor' / 'rules'}" in text
    assert "  mcp key:  mcpServers" in text


def test_render_empty_report() -> None:
    assert render_text([]) == ""
    assert render_json([]) == "[]"
