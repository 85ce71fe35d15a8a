"""User-facing progress output."""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager

import click
from rich.console import Console

from sf_utils.cli.output import user_output


class UserFeedback(ABC):
    """Provides user-facing diagnostic output.

    Workflow code calls ctx.feedback instead of printing directly, so tests can
    swap in a recording implementation and the spinner stays out of the core.

    Usage:
        with ctx.feedback.status("Cloning..."):
            ctx.git.clone_branch(...)
        ctx.feedback.success("✓ Cloned")
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show informational message."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show success message."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Show non-fatal problem."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Show error message."""

    @abstractmethod
    @contextmanager
    def status(self, message: str) -> Iterator[None]:
        """Show an in-progress indicator while the block runs."""


class InteractiveFeedback(UserFeedback):
    """Terminal feedback with click styling and a rich spinner."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console if console is not None else Console(stderr=True)

    def info(self, message: str) -> None:
        user_output(message)

    def success(self, message: str) -> None:
        user_output(click.style(message, fg="green"))

    def warning(self, message: str) -> None:
        user_output(click.style(message, fg="yellow"))

    def error(self, message: str) -> None:
        user_output(click.style(message, fg="red"))

    @contextmanager
    def status(self, message: str) -> Iterator[None]:
        with self._console.status(message, spinner="dots"):
            yield
