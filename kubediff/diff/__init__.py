"""Diffing of live and desired Kubernetes resource text.

Exports:
    format_name             -- Comparison filename for a resource.
    compute_diff / compare  -- Render a diff with an external comparison tool.
    summarize_diff          -- Summarize a unified diff with diffstat(1).
    FilteredStream          -- stderr sink that drops matching chunks.
    select_comparison_command, probe_availability, terminal_width
                            -- Tool selection helpers.
"""

from __future__ import annotations

from kubediff.diff.compare import compare, compute_diff
from kubediff.diff.errors import (
    InvocationError,
    KubeDiffError,
    ToolProbeError,
    ToolUnavailableError,
    WorkspaceError,
)
from kubediff.diff.filtering import FilteredStream
from kubediff.diff.naming import format_name
from kubediff.diff.process import (
    COMPARISON_EXIT_POLICY,
    STRICT_EXIT_POLICY,
    Command,
    CommandOutput,
    ExitPolicy,
    run_command,
)
from kubediff.diff.stats import summarize_diff
from kubediff.diff.tools import probe_availability, select_comparison_command, terminal_width

__all__ = [
    "COMPARISON_EXIT_POLICY",
    "Command",
    "CommandOutput",
    "ExitPolicy",
    "FilteredStream",
    "InvocationError",
    "KubeDiffError",
    "STRICT_EXIT_POLICY",
    "ToolProbeError",
    "ToolUnavailableError",
    "WorkspaceError",
    "compare",
    "compute_diff",
    "format_name",
    "probe_availability",
    "run_command",
    "select_comparison_command",
    "summarize_diff",
    "terminal_width",
]
