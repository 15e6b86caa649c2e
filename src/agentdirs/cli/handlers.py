"""CLI subcommand handlers."""

from __future__ import annotations

import argparse
import logging

from agentdirs.config import load_config
from agentdirs.constants.agents import AGENT_LIST_JOINER
from agentdirs.constants.cli import EXIT_OK
from agentdirs.reporting import build_agent_report, render_json, render_text
from agentdirs.resolution import parse_agent_list, resolve_agents

logger = logging.getLogger(__name__)


def handle_resolve(args: argparse.Namespace) -> int:
    """Resolve target agents for a project and print their locations.

    Command-line values take precedence over values from ``agentdirs.yaml``.
    """
    config = load_config(args.root, args.config)
    target_agents = args.agents if args.agents is not None else config.target_agents
    default_agents = args.default_agents if args.default_agents is not None else config.default_agents
    auto_detect = args.auto_detect if args.auto_detect is not None else config.auto_detect

    agents = resolve_agents(args.root, target_agents, auto_detect, default_agents)
    logger.debug("Resolved agents: %s", agents)
    _print_report(args, agents)
    return EXIT_OK


def handle_paths(args: argparse.Namespace) -> int:
    """Print locations for the agents named on the command line."""
    agents = parse_agent_list(AGENT_LIST_JOINER.join(args.agent))
    logger.debug("Requested agents: %s", agents)
    _print_report(args, agents)
    return EXIT_OK


def _print_report(args: argparse.Namespace, agents: list[str]) -> None:
    entries = build_agent_report(args.root, agents)
    print(render_json(entries) if args.json else render_text(entries))
