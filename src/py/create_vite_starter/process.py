"""External process execution.

Scaffolding steps that shell out (repository initialization, dependency
installation) depend on the narrow :class:`ProcessRunner` protocol so that a
fake can be substituted in tests.
"""

import logging
import platform
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable

from create_vite_starter.exceptions import ExecutableNotFoundError, ExecutionError

__all__ = ("CommandResult", "ProcessRunner", "SubprocessRunner")

logger = logging.getLogger("create_vite_starter")


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a successful command."""

    command: list[str]
    return_code: int
    stdout: str = ""
    stderr: str = ""


@runtime_checkable
class ProcessRunner(Protocol):
    """Runs an external command to completion."""

    def run(self, command: str, args: "list[str]", *, cwd: Path) -> CommandResult:
        """Run ``command`` with ``args`` inside ``cwd``.

        Raises:
            ExecutableNotFoundError: If ``command`` cannot be resolved.
            ExecutionError: If the command exits with a non-zero status.
        """
        ...


class SubprocessRunner:
    """Process runner backed by :func:`subprocess.run`.

    Output is streamed to the terminal; only stderr is captured so that it can
    be reported when the command fails; undecodable bytes are replaced. A
    command that cannot be started is reported as an :class:`ExecutionError`
    with return code -1. No timeout is enforced.
    """

    def _resolve_executable(self, command: str) -> str:
        path = shutil.which(command)
        if path is None:
            raise ExecutableNotFoundError(command)
        return path

    def run(self, command: str, args: "list[str]", *, cwd: Path) -> CommandResult:
        executable = self._resolve_executable(command)
        full_command = [executable, *args]
        logger.debug("Running %s in %s", full_command, cwd)
        try:
            process = subprocess.run(
                full_command,
                cwd=cwd,
                shell=platform.system() == "Windows",
                check=False,
                stdout=None,  # inherit for live output
                stderr=subprocess.PIPE,
            )
        except OSError as e:
            # The command could not be started.
            raise ExecutionError(full_command, -1, str(e)) from e
        stderr = process.stderr.decode(errors="replace") if process.stderr else ""
        if process.returncode != 0:
            raise ExecutionError(full_command, process.returncode, stderr)
        return CommandResult(command=full_command, return_code=process.returncode, stderr=stderr)
