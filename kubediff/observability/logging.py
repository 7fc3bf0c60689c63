"""Structured logging configuration using structlog."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager

import structlog


def setup_logging(level: str = "warning") -> None:
    """Configure structlog for JSON output to stderr.

    stdout is reserved for rendered diffs, so log lines never mix with them.
    Every line carries ``program="kubediff"`` so it can be told apart from
    the diagnostic output of the external tools sharing stderr.
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            _add_program,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso", utc=True, key="ts"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def _add_program(logger: object, method_name: str, event_dict: dict) -> dict:
    event_dict.setdefault("program", "kubediff")
    return event_dict


@contextmanager
def bound_command(command: str) -> Iterator[None]:
    """Attach ``command=<command line>`` to every log line emitted in the block."""
    with structlog.contextvars.bound_contextvars(command=command):
        yield


def get_logger(component: str) -> structlog.stdlib.BoundLogger:
    """Get a logger bound with a component name."""
    return structlog.get_logger(component=component)  # type: ignore[return-value]
