#!/usr/bin/env python3
"""
Configuration constants and environment settings for the Hello World server.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

# Response payload
GREETING = "Hello World!"
GREETING_MIMETYPE = "text/plain"

# Default values
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_LOG_LEVEL = "INFO"
SERVICE_NAME = "Hello World Server"

# Error messages (user-friendly, no internal details)
ERROR_MESSAGES = {
    "not_found": "The requested resource was not found",
    "method_not_allowed": "The method is not allowed for the requested URL",
    "internal_error": "An unexpected error occurred",
}

# Logging configuration
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class ConfigError(ValueError):
    """Raised when an environment variable holds an unusable value."""


@dataclass(frozen=True)
class ServerSettings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    debug: bool = False
    log_level: str = DEFAULT_LOG_LEVEL


def load_env_file(env_path: Optional[Path] = None) -> bool:
    """Load variables from a .env file if one exists. Existing variables win.

    Without an explicit path the file is searched for from the current
    working directory upwards.
    """
    if env_path is None:
        found = find_dotenv(usecwd=True)
        if not found:
            return False
        env_path = Path(found)
    if env_path.exists():
        return load_dotenv(env_path)
    return False


def _parse_port(raw: str) -> int:
    try:
        port = int(raw)
    except ValueError:
        raise ConfigError(f"PORT must be an integer, got {raw!r}") from None
    if not 1 <= port <= 65535:
        raise ConfigError(f"PORT must be between 1 and 65535, got {port}")
    return port


def _parse_log_level(raw: str) -> str:
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"LOG_LEVEL is not a valid logging level: {raw!r}")
    return level


def load_settings(environ: Optional[Mapping[str, str]] = None) -> ServerSettings:
    """Build server settings from environment variables.

    Args:
        environ: Mapping to read from; defaults to ``os.environ``

    Returns:
        ServerSettings with defaults applied for unset variables

    Raises:
        ConfigError: If PORT or LOG_LEVEL cannot be used
    """
    if environ is None:
        environ = os.environ

    return ServerSettings(
        host=environ.get("HOST", DEFAULT_HOST),
        port=_parse_port(environ.get("PORT", str(DEFAULT_PORT))),
        debug=environ.get("DEBUG", "False").lower() == "true",
        log_level=_parse_log_level(environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL)),
    )
