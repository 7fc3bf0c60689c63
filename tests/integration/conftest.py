"""Shared fixtures for kubediff integration tests.

These tests run the real system tools. Each is skipped when the tool it
needs is not installed.
"""

from __future__ import annotations

import shutil
import tempfile
from pathlib import Path

import pytest

from kubediff.models.config import ToolsConfig

requires_diff = pytest.mark.skipif(shutil.which("diff") is None, reason="diff(1) not installed")
requires_diffstat = pytest.mark.skipif(shutil.which("diffstat") is None, reason="diffstat(1) not installed")
requires_sh = pytest.mark.skipif(shutil.which("sh") is None, reason="sh(1) not installed")
requires_false = pytest.mark.skipif(shutil.which("false") is None, reason="false(1) not installed")


@pytest.fixture()
def unified_config() -> ToolsConfig:
    """Tools config that always falls back to ``diff -u -N``."""
    return ToolsConfig(preferred_tool="kubediff-no-such-side-by-side-tool", fallback_tool="diff")


@pytest.fixture()
def temp_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Redirect tempfile so leftovers from a call are visible."""
    root = tmp_path / "tmp"
    root.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(root))
    return root
