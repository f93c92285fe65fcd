"""Create-Vite-Starter exception classes."""

from pathlib import Path

__all__ = [
    "AddonMissingError",
    "CancelledInputError",
    "CopyFailureError",
    "CreateViteStarterError",
    "DirectoryConflictError",
    "ExecutableNotFoundError",
    "ExecutionError",
]


class CreateViteStarterError(Exception):
    """Base exception for Create-Vite-Starter related errors."""


class CancelledInputError(CreateViteStarterError):
    """Raised when the user aborts an interactive prompt."""

    def __init__(self, message: str = "Operation cancelled.") -> None:
        super().__init__(message)


class DirectoryConflictError(CreateViteStarterError):
    """Raised when the target directory exists and is not empty."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Target directory {str(path)!r} is not empty.")
        self.path = path


class CopyFailureError(CreateViteStarterError):
    """Raised when the template tree cannot be copied into the target directory.

    The underlying I/O error is chained as ``__cause__``.
    """

    def __init__(self, source: Path, target: Path, reason: str) -> None:
        super().__init__(f"Failed to copy template {str(source)!r} to {str(target)!r}: {reason}")
        self.source = source
        self.target = target


class AddonMissingError(CreateViteStarterError):
    """Raised when an add-on source tree is not bundled with the tool."""

    def __init__(self, name: str, path: Path) -> None:
        super().__init__(f"Add-on {name!r} not found at {str(path)!r}.")
        self.name = name
        self.path = path


class ExecutableNotFoundError(CreateViteStarterError):
    """Raised when an external executable is not found."""

    def __init__(self, executable: str) -> None:
        super().__init__(f"Executable {executable!r} not found.")
        self.executable = executable


class ExecutionError(CreateViteStarterError):
    """Raised when an external command exits with a non-zero status."""

    def __init__(self, command: list[str], return_code: int, stderr: str) -> None:
        super().__init__(f"Command {command!r} failed with return code {return_code}.\nStderr: {stderr}")
        self.command = command
        self.return_code = return_code
        self.stderr = stderr
