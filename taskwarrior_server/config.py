"""
Server configuration for taskwarrior-server.

Environment variables:
- TASKWARRIOR_SERVER_COMMAND: Taskwarrior executable name or path (default: task)
- TASKWARRIOR_SERVER_TIMEOUT: Seconds to wait for one command; unset, empty or 0 means no timeout
- TASKWARRIOR_SERVER_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
"""

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class ServerConfig:
    """Runtime settings for the server and the task command it wraps."""

    task_command: str = "task"
    timeout: float | None = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Create configuration from environment variables, falling back to defaults."""
        config = cls()

        if command := os.environ.get("TASKWARRIOR_SERVER_COMMAND", "").strip():
            config.task_command = command

        if timeout := os.environ.get("TASKWARRIOR_SERVER_TIMEOUT", "").strip():
            try:
                seconds = float(timeout)
            except ValueError:
                logger.warning("Ignoring invalid TASKWARRIOR_SERVER_TIMEOUT: %r", timeout)
            else:
                config.timeout = seconds if seconds > 0 else None

        if level := os.environ.get("TASKWARRIOR_SERVER_LOG_LEVEL", "").strip():
            if level.upper() in _LOG_LEVELS:
                config.log_level = level.upper()
            else:
                logger.warning("Ignoring invalid TASKWARRIOR_SERVER_LOG_LEVEL: %r", level)

        return config


_config: ServerConfig | None = None


def get_config() -> ServerConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = ServerConfig.from_env()
    return _config


def set_config(config: ServerConfig | None) -> None:
    """Set the global configuration instance (None forces a reload from the environment)."""
    global _config
    _config = config
