"""Exception hierarchy for diff operations."""

from __future__ import annotations


class KubeDiffError(Exception):
    """Base class for every error raised by kubediff."""


class WorkspaceError(KubeDiffError):
    """Raised when the temporary workspace cannot be created or written."""


class InvocationError(KubeDiffError):
    """Raised when an external command cannot start or exits outside its policy."""

    def __init__(
        self,
        message: str,
        command: str = "",
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        super().__init__(message)
        self.command = command
        self.returncode = returncode
        self.stderr = stderr


class ToolUnavailableError(InvocationError):
    """Raised when none of the candidate comparison tools is installed."""


class ToolProbeError(KubeDiffError):
    """Raised when looking up a tool fails for a reason other than absence."""

    def __init__(self, tool: str, cause: Exception) -> None:
        super().__init__(f"Probing for '{tool}' failed: {cause}")
        self.tool = tool
        self.cause = cause
