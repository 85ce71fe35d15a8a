"""Dependency installation through yarn or npm.

Each package manager is a fixed strategy that turns a utility's dependency
lists into at most two command lines: one for runtime dependencies and one
for dev dependencies. Lists that are empty produce no command.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from sf_utils.core.catalog import UtilityDescriptor
from sf_utils.core.command_runner.abc import CommandRunner
from sf_utils.core.errors import InstallError
from sf_utils.core.subprocess import format_command
from sf_utils.core.user_feedback import UserFeedback

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PackageManager:
    """How one package manager adds runtime and dev dependencies."""

    key: str
    label: str
    add_command: tuple[str, ...]
    add_dev_command: tuple[str, ...]


YARN = PackageManager(
    key="yarn",
    label="Install with Yarn",
    add_command=("yarn", "add"),
    add_dev_command=("yarn", "add", "--dev"),
)

NPM = PackageManager(
    key="npm",
    label="Install with NPM",
    add_command=("npm", "install"),
    add_dev_command=("npm", "install", "--save-dev"),
)

PACKAGE_MANAGERS: tuple[PackageManager, ...] = (YARN, NPM)


def get_package_manager(key: str) -> PackageManager:
    for manager in PACKAGE_MANAGERS:
        if manager.key == key:
            return manager
    raise KeyError(key)


def build_install_commands(manager: PackageManager, utility: UtilityDescriptor) -> list[list[str]]:
    """Build the install command lines for a utility.

    Dependency tokens keep their version suffix and catalog order.

    Returns:
        Zero, one or two argv lists; runtime dependencies first
    """
    commands: list[list[str]] = []
    if utility.dependencies:
        commands.append([*manager.add_command, *utility.dependencies])
    if utility.dev_dependencies:
        commands.append([*manager.add_dev_command, *utility.dev_dependencies])
    return commands


def install_dependencies(
    runner: CommandRunner,
    feedback: UserFeedback,
    commands: list[list[str]],
    project_root: Path,
) -> list[str]:
    """Run install commands in order, stopping at the first failure.

    Args:
        runner: Executes the package manager
        feedback: Spinner and result reporting
        commands: Output of build_install_commands
        project_root: Directory holding the consuming project's package.json

    Returns:
        Rendered command lines that were executed successfully

    Raises:
        InstallError: If a command fails; earlier commands stay applied and are
            listed on the error's executed attribute
    """
    executed: list[str] = []
    for command in commands:
        rendered = format_command(command)
        logger.debug("Running install command: %s", rendered)
        try:
            with feedback.status(f"Installing dependencies: {rendered}"):
                stdout = runner.run(
                    command,
                    project_root,
                    operation_context="install dependencies",
                )
        except RuntimeError as e:
            feedback.error(f"Error installing dependencies: {e}")
            raise InstallError(str(e), executed=tuple(executed)) from e

        executed.append(rendered)
        if stdout.strip():
            feedback.info(stdout.rstrip())

    if executed:
        feedback.success("✓ Dependencies installed successfully.")
    return executed
