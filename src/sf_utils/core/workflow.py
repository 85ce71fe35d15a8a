"""The add-utility run: select, fetch, place, sanitize, install.

The run is a linear state machine. Each step is a plain call that either
returns or raises its typed error; run_add_utility turns the first fatal error
into a FAILED outcome and collects non-fatal ones as warnings.

    IDLE -> SELECTING -> [CONFIRMING] -> FETCHING -> PLACING -> SANITIZING
         -> INSTALL_PROMPT -> INSTALLING -> DONE

FAILED, ABORTED and DONE are terminal.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from sf_utils.core.catalog import UtilityDescriptor
from sf_utils.core.context import AppContext
from sf_utils.core.errors import (
    AddUtilityError,
    CopyError,
    FetchError,
    InstallError,
    MissingSource,
    PromptInterrupted,
)
from sf_utils.core.fetcher import create_temp_clone_dir, fetch_utility
from sf_utils.core.installer import (
    PACKAGE_MANAGERS,
    build_install_commands,
    get_package_manager,
    install_dependencies,
)
from sf_utils.core.placement import copy_tree, destination_for, remove_existing_copy
from sf_utils.core.sanitize import remove_temp_dir, sanitize

logger = logging.getLogger(__name__)


class RunState(Enum):
    IDLE = "idle"
    SELECTING = "selecting"
    CONFIRMING = "confirming overwrite"
    FETCHING = "fetching"
    PLACING = "placing"
    SANITIZING = "sanitizing"
    INSTALL_PROMPT = "choosing a package manager"
    INSTALLING = "installing"
    DONE = "done"
    FAILED = "failed"
    ABORTED = "aborted"


EXIT_CODES = {
    RunState.DONE: 0,
    RunState.FAILED: 1,
    RunState.ABORTED: 2,
}


@dataclass(frozen=True)
class RunOutcome:
    """Terminal result of one add run."""

    state: RunState
    utility: UtilityDescriptor | None = None
    destination: Path | None = None
    failed_step: RunState | None = None
    error: AddUtilityError | None = None
    warnings: tuple[str, ...] = ()
    install_commands: tuple[str, ...] = ()

    @property
    def exit_code(self) -> int:
        return EXIT_CODES[self.state]


def _enter(state: RunState) -> RunState:
    logger.debug("Entering state: %s", state.name)
    return state


def run_add_utility(ctx: AppContext) -> RunOutcome:
    """Drive one add run to a terminal state.

    Args:
        ctx: Context with the catalog, integrations and project root

    Returns:
        RunOutcome in DONE, FAILED or ABORTED state
    """
    warnings: list[str] = []

    state = _enter(RunState.SELECTING)
    try:
        utility_id = ctx.prompter.select_utility(ctx.catalog)
    except PromptInterrupted as e:
        return RunOutcome(state=RunState.FAILED, failed_step=state, error=e)

    utility = ctx.catalog.get(utility_id)
    if not utility.has_source:
        return RunOutcome(
            state=RunState.FAILED,
            utility=utility,
            failed_step=state,
            error=MissingSource(utility.name),
        )

    destination = destination_for(ctx.cwd, utility)
    replace_existing = False
    if destination.exists():
        state = _enter(RunState.CONFIRMING)
        try:
            replace_existing = ctx.prompter.confirm_overwrite(utility, destination)
        except PromptInterrupted as e:
            return RunOutcome(
                state=RunState.FAILED,
                utility=utility,
                destination=destination,
                failed_step=state,
                error=e,
            )
        if not replace_existing:
            ctx.feedback.warning("Operation canceled. No changes made.")
            return RunOutcome(state=RunState.ABORTED, utility=utility, destination=destination)

    state = _enter(RunState.FETCHING)
    try:
        temp_dir = create_temp_clone_dir(ctx.scratch_root)
    except OSError as e:
        error = FetchError(f"Could not create temporary folder: {e}")
        return RunOutcome(
            state=RunState.FAILED,
            utility=utility,
            destination=destination,
            failed_step=state,
            error=error,
        )

    try:
        fetch_utility(ctx.git, ctx.feedback, utility, temp_dir)
    except FetchError as e:
        warnings.extend(str(w) for w in remove_temp_dir(temp_dir))
        return RunOutcome(
            state=RunState.FAILED,
            utility=utility,
            destination=destination,
            failed_step=state,
            error=e,
            warnings=tuple(warnings),
        )

    state = _enter(RunState.PLACING)
    try:
        if replace_existing:
            remove_existing_copy(destination)
            ctx.feedback.success(f"✓ Old version of {utility.name} deleted successfully.")
        copy_tree(temp_dir, destination)
    except CopyError as e:
        warnings.extend(str(w) for w in remove_temp_dir(temp_dir))
        return RunOutcome(
            state=RunState.FAILED,
            utility=utility,
            destination=destination,
            failed_step=state,
            error=e,
            warnings=tuple(warnings),
        )
    ctx.feedback.success(f"✓ {utility.name} has been added to your utilities folder.")

    state = _enter(RunState.SANITIZING)
    warnings.extend(str(w) for w in sanitize(destination, temp_dir))

    executed: list[str] = []
    if utility.has_dependencies:
        state = _enter(RunState.INSTALL_PROMPT)
        try:
            manager_key = ctx.prompter.select_package_manager(PACKAGE_MANAGERS)
        except PromptInterrupted as e:
            return RunOutcome(
                state=RunState.FAILED,
                utility=utility,
                destination=destination,
                failed_step=state,
                error=e,
                warnings=tuple(warnings),
            )

        state = _enter(RunState.INSTALLING)
        commands = build_install_commands(get_package_manager(manager_key), utility)
        try:
            executed = install_dependencies(ctx.command_runner, ctx.feedback, commands, ctx.cwd)
        except InstallError as e:
            executed = list(e.executed)
            warnings.append(f"Dependencies were not installed: {e}")

    _enter(RunState.DONE)
    return RunOutcome(
        state=RunState.DONE,
        utility=utility,
        destination=destination,
        warnings=tuple(warnings),
        install_commands=tuple(executed),
    )
