"""Agent list parsing, detection and priority-driven resolution."""

from __future__ import annotations

import logging
from pathlib import Path

from agentdirs.config.model import AgentDirsConfig
from agentdirs.constants.agents import AGENT_LIST_SPLIT_PATTERN, FALLBACK_AGENT
from agentdirs.registry import KNOWN_AGENTS

logger = logging.getLogger(__name__)


def parse_agent_list(raw: str | None) -> list[str]:
    """Parse a ``;``/``,`` separated agent list into unique lowercase identifiers.

    Delimiters may be mixed. Empty fragments are dropped and the first
    occurrence of each identifier keeps its position.
    """
    if not raw:
        return []

    agents: list[str] = []
    seen: set[str] = set()
    for fragment in AGENT_LIST_SPLIT_PATTERN.split(raw):
        agent = fragment.strip().lower()
        if not agent or agent in seen:
            continue
        seen.add(agent)
        agents.append(agent)
    return agents


def detect_agents(project_dir: Path | str) -> list[str]:
    """Return known agents whose detection directory exists under *project_dir*."""
    root = Path(project_dir)
    detected: list[str] = []
    for name, definition in KNOWN_AGENTS.items():
        detection_path = root / definition.detection_dir
        try:
            if not detection_path.is_dir():
                continue
        except OSError as exc:
            logger.debug("Skipping unreadable detection path %s: %s", detection_path, exc)
            continue
        detected.append(name)
    logger.debug("Detected agents in %s: %s", root, detected)
    return detected


def resolve_agents(
    project_dir: Path | str,
    target_agents: str | None,
    auto_detect: bool,
    default_agents: str | None,
) -> list[str]:
    """Resolve the agents to operate on.

    Priority, first satisfied branch wins:

    1. ``target_agents`` when not blank; detection and defaults are skipped.
    2. Detected agents when ``auto_detect`` is set and at least one is found.
    3. ``default_agents`` when not blank.
    4. The single fallback agent.
    """
    if target_agents and target_agents.strip():
        logger.debug("Using explicit agents: %s", target_agents)
        return parse_agent_list(target_agents)

    if auto_detect:
        detected = detect_agents(project_dir)
        if detected:
            return detected

    if default_agents and default_agents.strip():
        logger.debug("Using default agents: %s", default_agents)
        return parse_agent_list(default_agents)

    logger.debug("No agents configured or detected; falling back to %s", FALLBACK_AGENT)
    return [FALLBACK_AGENT]


def resolve_agents_from_config(project_dir: Path | str, config: AgentDirsConfig) -> list[str]:
    """Resolve agents using the inputs carried by *config*."""
    return resolve_agents(
        project_dir,
        config.target_agents,
        config.auto_detect,
        config.default_agents,
    )
