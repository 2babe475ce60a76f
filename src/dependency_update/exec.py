"""Subprocess helpers for running the npm and git executables."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from .services.errors import DependencyMissingError, ExternalCommandFailedError


@dataclass(frozen=True)
class CommandRequest:
    """Command line to run, with its working directory."""

    argv: tuple[str, ...]
    cwd: Path | None = None


@dataclass(frozen=True)
class CommandResult:
    """Exit status and captured text output of a finished command."""

    argv: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str


class CommandRunner(Protocol):
    """Runtime command-execution interface."""

    def run(self, request: CommandRequest) -> CommandResult | None: ...


class SubprocessCommandRunner:
    """Default runner: blocks until the command exits and captures its output."""

    def run(self, request: CommandRequest) -> CommandResult | None:
        try:
            completed = subprocess.run(
                list(request.argv),
                cwd=request.cwd,
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError:
            return None
        return CommandResult(
            argv=request.argv,
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )


_DEFAULT_COMMAND_RUNNER: CommandRunner = SubprocessCommandRunner()


def _failure_detail(request: CommandRequest, result: CommandResult) -> str:
    command_text = " ".join(request.argv)
    output = (result.stderr or result.stdout or "").strip()
    if output:
        return f"command failed: {command_text}\n{output}"
    return f"command failed: {command_text}"


def run_checked(
    request: CommandRequest, *, runner: CommandRunner | None = None
) -> CommandResult:
    """Execute a command and raise a service failure unless it succeeds.

    Args:
        request: Command invocation to execute.
        runner: Optional runner override; defaults to subprocess.

    Returns:
        The successful ``CommandResult``.

    Raises:
        DependencyMissingError: The executable could not be found.
        ExternalCommandFailedError: The command exited non-zero.
    """
    result = (runner or _DEFAULT_COMMAND_RUNNER).run(request)
    if result is None:
        raise DependencyMissingError(
            f"missing required command: {request.argv[0]}",
            recovery_hint="install the command and make sure it is on PATH",
        )
    if result.returncode != 0:
        raise ExternalCommandFailedError(_failure_detail(request, result))
    return result
