"""structlog configuration for the AUR command-line client."""

from __future__ import annotations

import logging
import sys
from enum import Enum
from typing import Any, Self

import structlog

__all__ = [
    "LogLevel",
    "Profile",
    "configure_logging",
]


class Profile(Enum):
    """Logging profile."""

    production = "production"
    """Log messages in JSON."""

    development = "development"
    """Log messages in a format intended for human readability."""


class LogLevel(Enum):
    """Python logging level.

    Any case variation is accepted when converting a string to an enum value
    via the class constructor.
    """

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @classmethod
    def _missing_(cls, value: Any) -> Self | None:
        if not isinstance(value, str):
            return None
        value = value.upper()
        for member in cls:
            if member.value == value:
                return member
        return None


def configure_logging(
    *,
    name: str = "aurrpc",
    profile: Profile | str = Profile.development,
    log_level: LogLevel | str = LogLevel.WARNING,
) -> None:
    """Configure logging and structlog.

    Log messages go to standard error so that they do not mix with the
    command output on standard output.

    Parameters
    ----------
    name
        Name of the logger to configure.
    profile
        ``production`` formats messages as JSON, ``development`` formats
        them for the terminal. May be a `Profile` or a string.
    log_level
        The Python log level. May be a `LogLevel` or a case-insensitive
        string.
    """
    if not isinstance(log_level, LogLevel):
        log_level = LogLevel(log_level)
    if not isinstance(profile, Profile):
        profile = Profile[profile]

    stream_handler = logging.StreamHandler(stream=sys.stderr)
    stream_handler.setFormatter(logging.Formatter("%(message)s"))
    logger = logging.getLogger(name)
    logger.handlers = []
    logger.addHandler(stream_handler)
    logger.setLevel(log_level.value)

    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if profile == Profile.production:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
