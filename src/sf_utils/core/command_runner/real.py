"""Production CommandRunner backed by subprocess."""

from pathlib import Path

from sf_utils.core.command_runner.abc import CommandRunner
from sf_utils.core.subprocess import run_subprocess_with_context


class RealCommandRunner(CommandRunner):
    def run(self, command: list[str], cwd: Path, *, operation_context: str) -> str:
        result = run_subprocess_with_context(
            command,
            operation_context=operation_context,
            cwd=cwd,
        )
        return result.stdout
