"""Tests for the known-agent registry."""

from __future__ import annotations

import dataclasses

import pytest

from agentdirs.constants.agents import FALLBACK_AGENT
from agentdirs.registry import KNOWN_AGENTS, get_agent_definition, is_known_agent, known_agent_names


def test_known_agent_names_in_registry_order() -> None:
    assert known_agent_names() == ("copilot", "claude", "cursor", "roo")


@pytest.mark.parametrize(
    ("identifier", "expected"),
    [
        ("Copilot", "copilot"),
        ("CLAUDE", "claude"),
        ("cUrSoR", "cursor"),
        ("ROO", "roo"),
    ],
)
def test_lookup_is_case_insensitive(identifier: str, expected: str) -> None:
    definition = get_agent_definition(identifier)

    assert definition is not None
    assert definition.name == expected


@pytest.mark.parametrize("identifier", ["windsurf", "", " claude", "claude;cursor"])
def test_unknown_identifiers_return_none(identifier: str) -> None:
    assert get_agent_definition(identifier) is None
    assert not is_known_agent(identifier)


def test_keys_match_definition_names() -> None:
    for key, definition in KNOWN_AGENTS.items():
        assert key == definition.name.lower()


def test_mcp_root_key_variants() -> None:
    assert KNOWN_AGENTS["copilot"].mcp_root_key == "servers"
    assert {KNOWN_AGENTS[name].mcp_root_key for name in ("claude", "cursor", "roo")} == {"mcpServers"}


def test_copilot_mcp_dir_differs_from_detection_dir() -> None:
    copilot = KNOWN_AGENTS["copilot"]

    assert copilot.detection_dir == ".github"
    assert copilot.mcp_subpath == ".vscode"


def test_registry_is_read_only() -> None:
    with pytest.raises(TypeError):
        KNOWN_AGENTS["windsurf"] = KNOWN_AGENTS["claude"]  # type: ignore[index]


def test_definitions_are_frozen() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        KNOWN_AGENTS["claude"].name = "other"  # type: ignore[misc]


def test_fallback_agent_is_known() -> None:
    assert FALLBACK_AGENT == "copilot"
    assert is_known_agent(FALLBACK_AGENT)
