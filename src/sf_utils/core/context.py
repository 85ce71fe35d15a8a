"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from sf_utils.core.catalog import DEFAULT_CATALOG, Catalog
from sf_utils.core.command_runner.abc import CommandRunner
from sf_utils.core.command_runner.real import RealCommandRunner
from sf_utils.core.git.abc import Git
from sf_utils.core.git.real import RealGit
from sf_utils.core.prompter.abc import Prompter
from sf_utils.core.prompter.real import ClickPrompter
from sf_utils.core.user_feedback import InteractiveFeedback, UserFeedback


@dataclass(frozen=True)
class AppContext:
    """Immutable context holding all dependencies for an add run.

    Created at CLI entry point and threaded through the workflow.
    Frozen to prevent accidental modification at runtime.
    """

    git: Git
    command_runner: CommandRunner
    prompter: Prompter
    feedback: UserFeedback
    catalog: Catalog
    cwd: Path  # Project root: the directory the command was invoked from
    scratch_root: Path | None  # Parent for temp clone dirs; None = system temp

    @staticmethod
    def for_test(
        git: Git | None = None,
        command_runner: CommandRunner | None = None,
        prompter: Prompter | None = None,
        feedback: UserFeedback | None = None,
        catalog: Catalog | None = None,
        cwd: Path | None = None,
        scratch_root: Path | None = None,
    ) -> "AppContext":
        """Create test context with fakes for anything not provided.

        Example:
            >>> prompter = FakePrompter(utility_id="socket", package_manager="yarn")
            >>> ctx = AppContext.for_test(prompter=prompter, cwd=tmp_path)
        """
        from tests.fakes.command_runner import FakeCommandRunner
        from tests.fakes.git import FakeGit
        from tests.fakes.prompter import FakePrompter
        from tests.fakes.user_feedback import FakeUserFeedback

        if git is None:
            git = FakeGit()

        if command_runner is None:
            command_runner = FakeCommandRunner()

        if prompter is None:
            prompter = FakePrompter()

        if feedback is None:
            feedback = FakeUserFeedback()

        if catalog is None:
            catalog = DEFAULT_CATALOG

        return AppContext(
            git=git,
            command_runner=command_runner,
            prompter=prompter,
            feedback=feedback,
            catalog=catalog,
            cwd=cwd or Path("/test/default/cwd"),
            scratch_root=scratch_root,
        )


def create_context(*, catalog: Catalog = DEFAULT_CATALOG) -> AppContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.
    """
    return AppContext(
        git=RealGit(),
        command_runner=RealCommandRunner(),
        prompter=ClickPrompter(),
        feedback=InteractiveFeedback(),
        catalog=catalog,
        cwd=Path.cwd(),
        scratch_root=None,
    )
