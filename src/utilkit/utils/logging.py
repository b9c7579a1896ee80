"""Structured logging setup using structlog."""

from __future__ import annotations

import logging
import sys

import structlog

from ..config import Settings


def setup_logging(log_level: str = "INFO", json_logs: bool = True):
    """Configure structlog with JSON (or console) output to stdout.

    Should be called once at application startup.
    """
    renderer = structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, log_level.upper())),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
    )


def configure_from_settings(settings: Settings | None = None):
    """Apply the logging options of *settings* (read from the environment if omitted)."""
    settings = settings or Settings()
    setup_logging(settings.log_level, json_logs=settings.json_logs)


def get_logger(name: str) -> structlog.BoundLogger:
    """Return a bound logger for the given component *name*."""
    return structlog.get_logger(name)
