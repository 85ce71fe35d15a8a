"""High-level git operations interface.

Architecture:
- Git: Abstract base class defining the interface
- RealGit: Production implementation using subprocess
- FakeGit (tests/fakes/git.py): In-memory implementation for tests
"""

from abc import ABC, abstractmethod
from pathlib import Path


class Git(ABC):
    """Abstract interface for git operations.

    This interface contains ONLY runtime operations - no test setup methods.
    """

    @abstractmethod
    def clone_branch(self, source_url: str, branch: str, destination: Path) -> None:
        """Clone a single branch of a remote repository.

        Args:
            source_url: Remote repository location
            branch: Branch or tag to check out
            destination: Directory to clone into; must be absent or empty

        Raises:
            RuntimeError: If the clone fails, with the git error output
        """
        ...
