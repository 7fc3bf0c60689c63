"""Rendering of diffs between live and desired resource text."""

from __future__ import annotations

import os
import tempfile
from typing import IO, Any

from kubediff.diff.errors import WorkspaceError
from kubediff.diff.process import COMPARISON_EXIT_POLICY, run_command
from kubediff.diff.tools import select_comparison_command
from kubediff.models.config import ToolsConfig
from kubediff.models.resources import ComparisonRequest, ComparisonResult
from kubediff.observability.logging import get_logger

_logger = get_logger("diff.compare")

_WORKSPACE_PREFIX = "diff"
_LIVE_PREFIX = "LIVE-"
_MERGED_PREFIX = "MERGED-"


def _write(path: str, text: str) -> None:
    try:
        with open(path, "w", encoding="utf-8") as fh:
            fh.write(text)
    except OSError as exc:
        raise WorkspaceError(f"writing {path}: {exc}") from exc


def compute_diff(
    name: str,
    live_text: str,
    desired_text: str,
    *,
    config: ToolsConfig | None = None,
    stderr: IO[Any] | None = None,
) -> str:
    """Diff *live_text* against *desired_text* with an external tool.

    Both texts are written to ``LIVE-<name>`` and ``MERGED-<name>`` inside a
    private temporary directory, which is removed before returning whatever
    happens. The result is ``""`` when there are no differences, otherwise
    the command line followed by a newline and the tool's output.

    *stderr*, when given, receives the tool's diagnostic output line by line
    (typically a FilteredStream); otherwise it goes to the inherited stderr.

    Raises:
        WorkspaceError: the temporary files could not be created or written.
        InvocationError: the tool could not run or reported a real failure.
    """
    try:
        workspace = tempfile.TemporaryDirectory(prefix=_WORKSPACE_PREFIX)
    except OSError as exc:
        raise WorkspaceError(f"creating temporary directory: {exc}") from exc

    with workspace as directory:
        _logger.debug("workspace_created", path=directory, name=name)
        live = os.path.join(directory, _LIVE_PREFIX + name)
        merged = os.path.join(directory, _MERGED_PREFIX + name)
        _write(live, live_text)
        _write(merged, desired_text)

        command = select_comparison_command(live, merged, config)
        output = run_command(command, policy=COMPARISON_EXIT_POLICY, stderr_sink=stderr)

    if output.stdout == "":
        return ""
    return f"{command}\n{output.stdout}"


def compare(
    request: ComparisonRequest,
    *,
    config: ToolsConfig | None = None,
    stderr: IO[Any] | None = None,
) -> ComparisonResult:
    """Run ``compute_diff`` for *request*."""
    rendered = compute_diff(
        request.name,
        request.live_text,
        request.desired_text,
        config=config,
        stderr=stderr,
    )
    return ComparisonResult(rendered_text=rendered)
