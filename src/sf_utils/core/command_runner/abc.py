"""Abstraction over running external commands such as yarn and npm."""

from abc import ABC, abstractmethod
from pathlib import Path


class CommandRunner(ABC):
    """Runs one external command to completion."""

    @abstractmethod
    def run(self, command: list[str], cwd: Path, *, operation_context: str) -> str:
        """Run command in cwd and return its captured stdout.

        Args:
            command: Program and arguments, not passed through a shell
            cwd: Working directory for the command
            operation_context: Human-readable description used in error messages

        Raises:
            RuntimeError: If the command exits non-zero or cannot be found
        """
        ...
