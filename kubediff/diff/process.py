"""Execution of short-lived external commands.

Every call carries an ``ExitPolicy`` naming the exit codes that count as
success. Comparison tools exit 1 when differences exist, so they run under
``COMPARISON_EXIT_POLICY``; everything else runs under ``STRICT_EXIT_POLICY``.
"""

from __future__ import annotations

import shlex
import subprocess
from dataclasses import dataclass
from typing import IO, Any

from kubediff.diff.errors import InvocationError
from kubediff.observability.logging import bound_command, get_logger

_logger = get_logger("diff.process")


@dataclass(frozen=True)
class Command:
    """An executable and its arguments."""

    argv: tuple[str, ...]

    @property
    def executable(self) -> str:
        return self.argv[0]

    def __str__(self) -> str:
        return shlex.join(self.argv)


@dataclass(frozen=True)
class ExitPolicy:
    """Set of process exit codes accepted as success."""

    accepted: frozenset[int]

    def allows(self, returncode: int) -> bool:
        return returncode in self.accepted


COMPARISON_EXIT_POLICY = ExitPolicy(frozenset({0, 1}))
STRICT_EXIT_POLICY = ExitPolicy(frozenset({0}))


@dataclass(frozen=True)
class CommandOutput:
    """Captured result of a finished command."""

    returncode: int
    stdout: str
    stderr: str = ""


def run_command(
    command: Command,
    *,
    policy: ExitPolicy = STRICT_EXIT_POLICY,
    stdin_text: str | None = None,
    capture_stderr: bool = False,
    stderr_sink: IO[Any] | None = None,
    label: str | None = None,
) -> CommandOutput:
    """Run *command* to completion and return its captured output.

    stdout is always captured. stderr is inherited unless ``capture_stderr``
    is set or a ``stderr_sink`` is given; a sink receives the captured
    stderr one line per ``write`` call. *label* names the tool in error
    messages and defaults to the executable.

    Raises:
        InvocationError: the command could not be started, or its exit code
            is outside *policy*.
    """
    label = label or command.executable
    capture = capture_stderr or stderr_sink is not None
    with bound_command(str(command)):
        try:
            completed = subprocess.run(
                list(command.argv),
                input=stdin_text,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE if capture else None,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except OSError as exc:
            _logger.debug("command_start_failed", error=str(exc))
            raise InvocationError(
                f"invoking {label}: {exc}",
                command=str(command),
            ) from exc

        stderr = completed.stderr or ""
        if stderr_sink is not None:
            for line in stderr.splitlines(keepends=True):
                stderr_sink.write(line)

        _logger.debug(
            "command_finished",
            returncode=completed.returncode,
            stdout_len=len(completed.stdout),
        )

    if not policy.allows(completed.returncode):
        detail = stderr.strip() or f"exit status {completed.returncode}"
        raise InvocationError(
            f"invoking {label}: {detail}",
            command=str(command),
            returncode=completed.returncode,
            stderr=stderr,
        )

    return CommandOutput(returncode=completed.returncode, stdout=completed.stdout, stderr=stderr)
