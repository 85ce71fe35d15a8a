"""Prompter backed by click prompts."""

from pathlib import Path

import click

from sf_utils.cli.output import user_output
from sf_utils.core.catalog import Catalog, UtilityDescriptor
from sf_utils.core.errors import PromptInterrupted
from sf_utils.core.installer import PackageManager
from sf_utils.core.prompter.abc import Prompter


class ClickPrompter(Prompter):
    """Asks questions on the terminal.

    click raises Abort on Ctrl-C and on end of input; both become
    PromptInterrupted so the workflow can report a clean failure.
    """

    def select_utility(self, catalog: Catalog) -> str:
        question = "Which utility would you like to add?"
        user_output(question)
        for utility in catalog:
            id_part = click.style(utility.id, fg="cyan", bold=True)
            user_output(f"  {id_part}  {utility.name}")
        try:
            return click.prompt(
                "Utility",
                type=click.Choice(catalog.ids()),
                err=True,
            )
        except click.Abort as e:
            raise PromptInterrupted(question) from e

    def confirm_overwrite(self, utility: UtilityDescriptor, destination: Path) -> bool:
        question = (
            f'The utility "{utility.name}" already exists at {destination}. '
            "Do you want to delete the old version and add a new one?"
        )
        try:
            return click.confirm(question, default=False, err=True)
        except click.Abort as e:
            raise PromptInterrupted(question) from e

    def select_package_manager(self, managers: tuple[PackageManager, ...]) -> str:
        question = "Would you like to install additional dependencies?"
        user_output(question)
        for manager in managers:
            key_part = click.style(manager.key, fg="cyan", bold=True)
            user_output(f"  {key_part}  {manager.label}")
        try:
            return click.prompt(
                "Package manager",
                type=click.Choice([manager.key for manager in managers]),
                err=True,
            )
        except click.Abort as e:
            raise PromptInterrupted(question) from e
