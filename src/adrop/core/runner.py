"""External command execution with soft-failure results."""

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, Sequence


@dataclass
class CommandResult:
    """Outcome of one external call.

    A failed call is a value, not an exception: callers decide whether to
    warn and continue.
    """

    command: str
    success: bool
    output: str = ""
    message: str = ""

    @classmethod
    def ok(cls, command: str, output: str = "") -> "CommandResult":
        return cls(command=command, success=True, output=output)

    @classmethod
    def failed(cls, command: str, message: str, output: str = "") -> "CommandResult":
        return cls(command=command, success=False, output=output, message=message)


class CommandRunner(Protocol):
    """Anything able to run an argument list and report how it went."""

    def run(self, args: Sequence[str], cwd: Path | None = None) -> CommandResult:
        ...


def format_command(args: Sequence[str]) -> str:
    """Render an argument list for log output."""
    return subprocess.list2cmdline([str(a) for a in args])


class SubprocessRunner:
    """Run commands with :mod:`subprocess`, waiting for each to finish."""

    def run(self, args: Sequence[str], cwd: Path | None = None) -> CommandResult:
        """Run a command and capture its output.

        Args:
            args: Program and arguments.
            cwd: Working directory for the command.

        Returns:
            CommandResult; unsuccessful on non-zero exit or if the
            program could not be started.
        """
        command = format_command(args)
        try:
            completed = subprocess.run(
                [str(a) for a in args],
                cwd=cwd,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            return CommandResult.failed(command, str(e))

        if completed.returncode != 0:
            detail = (completed.stderr or completed.stdout).strip()
            message = f"Command failed (exit {completed.returncode}): {command}"
            if detail:
                message = f"{message}\n{detail}"
            return CommandResult.failed(command, message, output=completed.stdout)

        return CommandResult.ok(command, output=completed.stdout)
