"""Production Git implementation using subprocess."""

from pathlib import Path

from sf_utils.core.git.abc import Git
from sf_utils.core.subprocess import run_subprocess_with_context


class RealGit(Git):
    """Production implementation executing the git binary."""

    def clone_branch(self, source_url: str, branch: str, destination: Path) -> None:
        """Clone only the requested branch into destination."""
        run_subprocess_with_context(
            [
                "git",
                "clone",
                "--single-branch",
                "--branch",
                branch,
                source_url,
                str(destination),
            ],
            operation_context=f"clone branch '{branch}' from {source_url}",
        )
