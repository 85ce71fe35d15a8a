"""Output utilities for CLI commands with clear intent.

user_output() is for anything a human reads (routed to stderr).
format_run_summary() renders the terminal outcome of an add run.
"""

from typing import TYPE_CHECKING, Any

import click
from rich.panel import Panel
from rich.text import Text

if TYPE_CHECKING:
    from sf_utils.core.workflow import RunOutcome


def user_output(message: Any = "", nl: bool = True) -> None:
    """Output informational message for human users (to stderr)."""
    click.echo(message, nl=nl, err=True)


def format_run_summary(outcome: "RunOutcome") -> Panel:
    """Format the final summary box for a finished run.

    Args:
        outcome: Terminal outcome returned by run_add_utility

    Returns:
        Rich Panel with status, destination, executed commands and the fatal cause
    """
    from sf_utils.core.workflow import RunState

    lines: list[Text] = []

    if outcome.state == RunState.DONE:
        lines.append(Text("✅ Status: Added", style="green"))
        border_style = "green"
        title = "Utility Added"
    elif outcome.state == RunState.ABORTED:
        lines.append(Text("⏹  Status: Cancelled, no changes made", style="yellow"))
        border_style = "yellow"
        title = "Operation Cancelled"
    else:
        step = outcome.failed_step.value if outcome.failed_step is not None else "unknown"
        lines.append(Text(f"❌ Status: Failed while {step}", style="red"))
        border_style = "red"
        title = "Utility Not Added"

    if outcome.utility is not None:
        lines.append(Text(f"📦 Utility: {outcome.utility.name}"))

    if outcome.destination is not None and outcome.state == RunState.DONE:
        lines.append(Text(f"📁 Location: {outcome.destination}", style="blue"))

    for command in outcome.install_commands:
        lines.append(Text(f"$ {command}", style="dim"))

    if outcome.error is not None:
        lines.append(Text(""))
        lines.append(Text(str(outcome.error), style="red"))

    content = Text("\n").join(lines)
    return Panel(content, title=title, border_style=border_style, padding=(1, 2))
