"""Git operations subpackage.

Only cloning is needed: a single branch of a utility repository is fetched
into a scratch directory.
"""

from sf_utils.core.git.abc import Git
from sf_utils.core.git.real import RealGit

__all__ = [
    "Git",
    "RealGit",
]
