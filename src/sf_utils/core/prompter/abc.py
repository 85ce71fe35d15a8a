"""Interactive questions asked during an add run."""

from abc import ABC, abstractmethod
from pathlib import Path

from sf_utils.core.catalog import Catalog, UtilityDescriptor
from sf_utils.core.installer import PackageManager


class Prompter(ABC):
    """Asks the user the three questions of an add run.

    Every method raises PromptInterrupted when the user aborts the prompt.
    """

    @abstractmethod
    def select_utility(self, catalog: Catalog) -> str:
        """Return the id of the utility to add."""
        ...

    @abstractmethod
    def confirm_overwrite(self, utility: UtilityDescriptor, destination: Path) -> bool:
        """Ask whether an existing copy at destination may be replaced.

        Defaults to False.
        """
        ...

    @abstractmethod
    def select_package_manager(self, managers: tuple[PackageManager, ...]) -> str:
        """Return the key of the package manager to install with."""
        ...
