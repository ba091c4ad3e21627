"""
Settings for the accumulator CLI and logging.

Environment Variables:
    TALLY_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR) - default: WARNING
    TALLY_LOG_FORMAT: Log format (json, text) - default: text
    TALLY_JSON: Emit JSON from CLI commands (true/false) - default: false
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("json", "text")

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    log_format: str = "text"
    json_output: bool = False

    @staticmethod
    def from_env(environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        Unknown levels and formats fall back to the defaults.
        """
        env = os.environ if environ is None else environ

        level = env.get("TALLY_LOG_LEVEL", "WARNING").upper()
        if level not in LOG_LEVELS:
            level = "WARNING"

        fmt = env.get("TALLY_LOG_FORMAT", "text").lower()
        if fmt not in LOG_FORMATS:
            fmt = "text"

        json_output = env.get("TALLY_JSON", "false").strip().lower() in _TRUTHY
        return Settings(log_level=level, log_format=fmt, json_output=json_output)
