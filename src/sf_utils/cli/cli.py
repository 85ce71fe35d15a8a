import logging
import os

import click
from rich.console import Console

from sf_utils.cli.output import format_run_summary, user_output
from sf_utils.core.context import AppContext, create_context
from sf_utils.core.workflow import RunState, run_add_utility

logger = logging.getLogger(__name__)

# Enable debug logging if ADD_SF_UTILS_DEBUG environment variable is set
if os.getenv("ADD_SF_UTILS_DEBUG"):
    logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.command("add-sf-utils", context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="add-sf-utils")
@click.pass_context
def cli(click_ctx: click.Context) -> None:
    """Add a Seaflux utility to the current project.

    Prompts for a utility, clones its branch, copies the files into
    src/utilities (or ./utilities when there is no src folder), strips
    packaging files and optionally installs its dependencies with yarn or npm.

    \b
    Exit codes:
      0  utility added
      1  a step failed
      2  cancelled, existing utility left untouched
    """
    # Only create context if not already provided (e.g., by tests)
    if click_ctx.obj is None:
        click_ctx.obj = create_context()
    ctx: AppContext = click_ctx.obj

    outcome = run_add_utility(ctx)
    logger.debug("Run finished: state=%s exit_code=%d", outcome.state.name, outcome.exit_code)

    if outcome.state == RunState.FAILED and outcome.error is not None:
        user_output(click.style("Error: ", fg="red") + str(outcome.error))

    Console(stderr=True).print(format_run_summary(outcome))

    for warning in outcome.warnings:
        user_output(click.style("Warning: ", fg="yellow") + warning)

    if outcome.exit_code != 0:
        raise SystemExit(outcome.exit_code)


def main() -> None:
    """CLI entry point used by the `add-sf-utils` console script."""
    cli()
