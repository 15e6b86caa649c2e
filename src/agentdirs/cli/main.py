"""CLI entrypoint for Agentdirs."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from agentdirs import __version__
from agentdirs.cli.handlers import handle_paths, handle_resolve
from agentdirs.constants.branding import CLI_DESCRIPTION
from agentdirs.constants.cli import EXIT_CONFIG_ERROR, EXIT_ERROR
from agentdirs.exceptions import AgentDirsError, ConfigError


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="agentdirs",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve = subparsers.add_parser("resolve", help="Resolve target agents for a project")
    resolve.add_argument("-r", "--root", type=Path, required=True, help="Project root path")
    resolve.add_argument("-c", "--config", type=Path, help="Explicit config file")
    resolve.add_argument(
        "-a",
        "--agents",
        default=None,
        help="Explicit agents, separated by ';' or ',' (skips detection and defaults)",
    )
    resolve.add_argument(
        "-d",
        "--default-agents",
        default=None,
        help="Agents used when none are set explicitly or detected",
    )
    resolve.add_argument(
        "--auto-detect",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Detect agents from their directories in the project root (default: on)",
    )
    resolve.add_argument("--json", action="store_true", help="Print the report as JSON")
    resolve.add_argument("-v", "--verbose", action="store_true", help="Show resolution diagnostics")

    paths = subparsers.add_parser("paths", help="Show skills and MCP locations for given agents")
    paths.add_argument("-r", "--root", type=Path, required=True, help="Project root path")
    paths.add_argument(
        "agent",
        nargs="+",
        help="Agent identifier(s), lowercased before lookup; ';' or ',' lists are accepted",
    )
    paths.add_argument("--json", action="store_true", help="Print the report as JSON")
    paths.add_argument("-v", "--verbose", action="store_true", help="Show resolution diagnostics")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    try:
        if args.command == "resolve":
            return handle_resolve(args)
        if args.command == "paths":
            return handle_paths(args)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except AgentDirsError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    parser.error(f"Unsupported command: {args.command}")
    return EXIT_ERROR


if __name__ == "__main__":
    raise SystemExit(main())
