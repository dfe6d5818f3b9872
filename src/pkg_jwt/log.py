"""
Structured logging setup for pkg_jwt.

The library never configures logging on import; host apps call
`configure_logging` once (or wire structlog themselves).
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


def configure_logging(log_level: str = "info") -> None:
    """
    Configure structlog + stdlib logging to emit JSON lines on stdout.

    Raises ValueError for a level outside LOG_LEVELS.
    """
    if log_level.lower() not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {log_level!r}")
    level = getattr(logging, log_level.upper())

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(level)


def get_logger(name: str) -> Any:
    return structlog.get_logger(name)
