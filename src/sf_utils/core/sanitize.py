"""Removal of packaging artifacts after a utility has been copied.

Artifacts belong to the utility's own repository (its manifest, lockfiles,
compiler configs and git metadata) and must not ship into the consuming
project. Every removal here is best-effort: failures become CleanupWarning
values instead of exceptions.
"""

import logging
import shutil
from collections.abc import Callable, Iterable
from pathlib import Path

from sf_utils.core.errors import CleanupWarning

logger = logging.getLogger(__name__)

ARTIFACT_NAMES: tuple[str, ...] = (
    "package.json",
    "package-lock.json",
    "yarn.lock",
    ".gitignore",
    ".git",
    "tsconfig.json",
    ".swcrc",
)


def run_best_effort(operations: Iterable[tuple[str, Callable[[], None]]]) -> list[CleanupWarning]:
    """Run independent operations, collecting failures instead of stopping.

    Args:
        operations: (description, callable) pairs; description names the target

    Returns:
        One CleanupWarning per failed operation, in execution order
    """
    warnings: list[CleanupWarning] = []
    for description, operation in operations:
        try:
            operation()
        except OSError as e:
            logger.warning("Error deleting %s: %s", description, e)
            warnings.append(CleanupWarning(f"Error deleting {description}: {e}"))
    return warnings


def remove_path(path: Path) -> None:
    """Delete a file or directory tree. A missing path is not an error."""
    if path.is_symlink() or path.is_file():
        path.unlink(missing_ok=True)
    elif path.is_dir():
        shutil.rmtree(path)


def remove_artifacts(destination: Path) -> list[CleanupWarning]:
    """Delete every artifact found directly under destination."""
    return run_best_effort(
        (str(destination / name), _remover(destination / name)) for name in ARTIFACT_NAMES
    )


def remove_temp_dir(temp_dir: Path) -> list[CleanupWarning]:
    """Delete the scratch clone directory."""
    return run_best_effort([(f"temporary folder {temp_dir}", _remover(temp_dir))])


def sanitize(destination: Path, temp_dir: Path) -> list[CleanupWarning]:
    """Strip artifacts from destination, then drop the scratch clone."""
    warnings = remove_artifacts(destination)
    warnings.extend(remove_temp_dir(temp_dir))
    return warnings


def _remover(path: Path) -> Callable[[], None]:
    return lambda: remove_path(path)
