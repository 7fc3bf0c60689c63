"""Shared pytest configuration for kubediff tests."""

from __future__ import annotations

import pytest

from kubediff.observability.logging import setup_logging


@pytest.fixture(autouse=True, scope="session")
def _configure_logging() -> None:
    """Keep structlog output off stdout so it never mixes with rendered diffs."""
    setup_logging("warning")
