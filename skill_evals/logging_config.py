"""Structured logging configuration using structlog."""

import logging
import sys

import structlog


def setup_logging(log_level: str = "INFO", *, json_logs: bool = False) -> None:
    """Configure structlog for an eval run.

    Suite reports go to stdout, so log lines are written to stderr and never
    interleave with the result tables. CI runs can ask for one JSON object
    per line instead of the console layout.

    Args:
        log_level: Python log level name (DEBUG, INFO, WARNING, ERROR).
            Unknown names fall back to INFO.
        json_logs: Render events as JSON lines.
    """
    if json_logs:
        renderer = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        renderer = [structlog.dev.set_exc_info, structlog.dev.ConsoleRenderer()]

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.TimeStamper(fmt="iso"),
            *renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )
