"""Tests for comparison tool selection and terminal width detection."""

from __future__ import annotations

import subprocess
from unittest.mock import patch

import pytest

from kubediff.diff.errors import ToolProbeError, ToolUnavailableError
from kubediff.diff.tools import probe_availability, select_comparison_command, terminal_width
from kubediff.models.config import ToolsConfig

_RUN = "kubediff.diff.tools.subprocess.run"
_PROBE = "kubediff.diff.tools.probe_availability"
_WIDTH = "kubediff.diff.tools.terminal_width"


def _stty(stdout: str, returncode: int = 0) -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(args=["stty", "size"], returncode=returncode, stdout=stdout, stderr="")


def _available(*tools: str):
    return lambda tool: tool in tools


class TestTerminalWidth:
    def test_second_token_is_columns(self) -> None:
        with patch(_RUN, return_value=_stty("50 132\n")):
            assert terminal_width() == "132"

    def test_query_failure_defaults_to_80(self) -> None:
        with patch(_RUN, side_effect=OSError("not a tty")):
            assert terminal_width() == "80"

    def test_non_zero_exit_defaults_to_80(self) -> None:
        with patch(_RUN, return_value=_stty("", returncode=1)):
            assert terminal_width() == "80"

    @pytest.mark.parametrize("output", ["", "42", "rows cols", "24 wide\n"])
    def test_malformed_output_defaults_to_80(self, output: str) -> None:
        with patch(_RUN, return_value=_stty(output)):
            assert terminal_width() == "80"

    def test_custom_default(self) -> None:
        with patch(_RUN, side_effect=ValueError("redirected stdin")):
            assert terminal_width(default=120) == "120"


class TestProbeAvailability:
    def test_present(self) -> None:
        with patch("kubediff.diff.tools.shutil.which", return_value="/usr/bin/diff"):
            assert probe_availability("diff") is True

    def test_absent(self) -> None:
        with patch("kubediff.diff.tools.shutil.which", return_value=None):
            assert probe_availability("icdiff") is False

    def test_lookup_error_is_recoverable(self) -> None:
        with patch("kubediff.diff.tools.shutil.which", side_effect=PermissionError("denied")):
            with pytest.raises(ToolProbeError) as exc_info:
                probe_availability("icdiff")

        assert exc_info.value.tool == "icdiff"
        assert isinstance(exc_info.value.cause, PermissionError)


class TestSelectComparisonCommand:
    def test_prefers_side_by_side_tool(self) -> None:
        with patch(_PROBE, side_effect=_available("icdiff", "diff")), patch(_WIDTH, return_value="132"):
            command = select_comparison_command("/w/LIVE-x", "/w/MERGED-x")

        assert command.argv == ("icdiff", "-r", "--cols=132", "/w/LIVE-x", "/w/MERGED-x")

    def test_falls_back_to_unified_diff(self) -> None:
        with patch(_PROBE, side_effect=_available("diff")), patch(_WIDTH) as width:
            command = select_comparison_command("/w/LIVE-x", "/w/MERGED-x")

        assert command.argv == ("diff", "-u", "-N", "/w/LIVE-x", "/w/MERGED-x")
        width.assert_not_called()

    def test_no_tool_is_an_error(self) -> None:
        with patch(_PROBE, return_value=False):
            with pytest.raises(ToolUnavailableError, match="icdiff or diff"):
                select_comparison_command("/w/LIVE-x", "/w/MERGED-x")

    def test_configured_tools_and_width(self) -> None:
        config = ToolsConfig(preferred_tool="ydiff", fallback_tool="gdiff", default_width=100)
        with patch(_PROBE, side_effect=_available("ydiff")), patch(_WIDTH, return_value="100") as width:
            command = select_comparison_command("a", "b", config)

        width.assert_called_once_with(100)
        assert command.argv[0] == "ydiff"

    def test_preferred_lookup_error_falls_back(self) -> None:
        def which(tool: str) -> str:
            if tool == "icdiff":
                raise PermissionError("denied")
            return f"/usr/bin/{tool}"

        with patch("kubediff.diff.tools.shutil.which", side_effect=which):
            command = select_comparison_command("/w/LIVE-x", "/w/MERGED-x")

        assert command.argv == ("diff", "-u", "-N", "/w/LIVE-x", "/w/MERGED-x")

    def test_lookup_errors_for_both_tools_is_unavailable(self) -> None:
        with patch(_PROBE, side_effect=ToolProbeError("any", OSError("boom"))):
            with pytest.raises(ToolUnavailableError):
                select_comparison_command("a", "b")
