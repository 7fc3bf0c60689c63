"""Summaries of unified diffs via diffstat(1)."""

from __future__ import annotations

from kubediff.diff.process import STRICT_EXIT_POLICY, Command, run_command
from kubediff.models.config import ToolsConfig


def summarize_diff(diff_text: str, config: ToolsConfig | None = None) -> str:
    """Return the per-file change counts for *diff_text*.

    The statistics tool has no "differences found" exit code, so any
    non-zero exit raises InvocationError carrying the tool's stderr.
    """
    config = config or ToolsConfig()
    output = run_command(
        Command((config.stats_tool, "-C")),
        policy=STRICT_EXIT_POLICY,
        stdin_text=diff_text,
        capture_stderr=True,
        label=f"{config.stats_tool}(1)",
    )
    return output.stdout
