"""Constants for CLI exit codes."""

from __future__ import annotations

EXIT_OK: int = 0
EXIT_ERROR: int = 1
EXIT_CONFIG_ERROR: int = 2
