"""Logging setup for rpn-calc."""

import logging
import sys

import structlog


def configure_logging(level: str = "WARNING") -> None:
    """Route structlog output to stderr, dropping events below ``level``."""
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
        # sys.stderr is looked up per logger, not at configure time
        logger_factory=lambda *args: structlog.PrintLogger(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def ensure_logging() -> None:
    """Apply the default configuration unless the application configured structlog."""
    if not structlog.is_configured():
        configure_logging()
