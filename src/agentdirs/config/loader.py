"""Config loading and normalization from ``agentdirs.yaml``."""

from __future__ import annotations

import difflib
import logging
from pathlib import Path
from typing import Any

import yaml

from agentdirs.config.model import AgentDirsConfig
from agentdirs.constants.agents import AGENT_LIST_JOINER
from agentdirs.constants.config import (
    ALLOWED_CONFIG_KEYS,
    CONFIG_FILENAME,
    DEFAULT_AUTO_DETECT,
)
from agentdirs.exceptions import ConfigError

logger = logging.getLogger(__name__)


def load_config(root: Path, config_path: Path | None = None) -> AgentDirsConfig:
    """Load and validate agent config from ``agentdirs.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        logger.debug("No config file at %s; using defaults", path)
        return AgentDirsConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    for key in sorted(str(key) for key in raw):
        if key not in ALLOWED_CONFIG_KEYS:
            hint = _suggest_key(key, ALLOWED_CONFIG_KEYS)
            message = f"Unknown config key `{key}` in {path}"
            raise ConfigError(f"{message} ({hint})" if hint else message)

    auto_detect = raw.get("auto_detect")
    if auto_detect is None:
        auto_detect = DEFAULT_AUTO_DETECT
    if not isinstance(auto_detect, bool):
        raise ConfigError("auto_detect must be a boolean")

    logger.debug("Loaded config from %s", path)
    return AgentDirsConfig(
        target_agents=_coerce_agent_list(raw.get("target_agents"), "target_agents"),
        auto_detect=auto_detect,
        default_agents=_coerce_agent_list(raw.get("default_agents"), "default_agents"),
    )


def _coerce_agent_list(value: Any, key_name: str) -> str:
    """Normalize a string or list of strings into a delimiter-separated agent list."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)) and all(isinstance(item, str) for item in value):
        return AGENT_LIST_JOINER.join(value)
    raise ConfigError(f"{key_name} must be a string or a list of strings")


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
