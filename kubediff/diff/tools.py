"""Selection of the comparison tool available on this machine."""

from __future__ import annotations

import shutil
import subprocess
import sys

from kubediff.diff.errors import ToolProbeError, ToolUnavailableError
from kubediff.diff.process import Command
from kubediff.models.config import ToolsConfig
from kubediff.observability.logging import get_logger

_logger = get_logger("diff.tools")


def probe_availability(tool: str) -> bool:
    """Return True if *tool* can be found on ``PATH``.

    Absence is a normal answer. Any other lookup failure raises
    ToolProbeError so the caller decides what to do; the process is never
    terminated from here.
    """
    try:
        found = shutil.which(tool)
    except OSError as exc:
        _logger.warning("tool_probe_failed", tool=tool, error=str(exc))
        raise ToolProbeError(tool, exc) from exc
    return found is not None


def terminal_width(default: int = 80) -> str:
    """Column count of the controlling terminal as reported by ``stty size``.

    Returns *default* (as a string) when stdin is not a terminal, the query
    fails, or its output is malformed.
    """
    fallback = str(default)
    try:
        completed = subprocess.run(
            ["stty", "size"],
            stdin=sys.stdin,
            capture_output=True,
            text=True,
            check=False,
        )
    except (OSError, ValueError, subprocess.SubprocessError) as exc:
        _logger.debug("terminal_size_query_failed", error=str(exc))
        return fallback

    if completed.returncode != 0:
        return fallback
    tokens = completed.stdout.split()
    if len(tokens) < 2 or not tokens[1].isdigit():
        _logger.debug("terminal_size_malformed", output=completed.stdout)
        return fallback
    return tokens[1]


def _usable(tool: str) -> bool:
    """Availability of *tool*, counting a failed lookup as absence of that tool only."""
    try:
        return probe_availability(tool)
    except ToolProbeError:
        return False


def select_comparison_command(
    live_path: str,
    merged_path: str,
    config: ToolsConfig | None = None,
) -> Command:
    """Build the command that compares *live_path* against *merged_path*.

    The side-by-side tool is preferred and sized to the terminal; otherwise
    the unified-diff tool runs with ``-N`` so a missing live file compares
    as empty.

    A tool whose lookup fails is skipped like a missing one.

    Raises:
        ToolUnavailableError: neither tool is usable.
    """
    config = config or ToolsConfig()

    if _usable(config.preferred_tool):
        cols = terminal_width(config.default_width)
        command = Command((config.preferred_tool, "-r", f"--cols={cols}", live_path, merged_path))
    elif _usable(config.fallback_tool):
        command = Command((config.fallback_tool, "-u", "-N", live_path, merged_path))
    else:
        raise ToolUnavailableError(
            f"no comparison tool found: install {config.preferred_tool} or {config.fallback_tool}",
        )

    _logger.debug("comparison_tool_selected", tool=command.executable)
    return command
