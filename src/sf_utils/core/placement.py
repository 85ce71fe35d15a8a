"""Where utilities land in the consuming project and how they get there."""

import logging
import shutil
from pathlib import Path

from sf_utils.core.catalog import UtilityDescriptor
from sf_utils.core.errors import CopyError

logger = logging.getLogger(__name__)

SOURCE_DIR_NAME = "src"
UTILITIES_DIR_NAME = "utilities"


def resolve_utilities_root(project_root: Path) -> Path:
    """Return <project>/src/utilities when a src directory exists, else <project>/utilities."""
    source_dir = project_root / SOURCE_DIR_NAME
    if source_dir.is_dir():
        return source_dir / UTILITIES_DIR_NAME
    return project_root / UTILITIES_DIR_NAME


def destination_for(project_root: Path, utility: UtilityDescriptor) -> Path:
    return resolve_utilities_root(project_root) / utility.dest_folder


def remove_existing_copy(destination: Path) -> None:
    """Delete a previously added copy of a utility.

    Raises:
        CopyError: If the old copy cannot be removed completely
    """
    logger.debug("Removing existing copy at %s", destination)
    try:
        if destination.is_dir() and not destination.is_symlink():
            shutil.rmtree(destination)
        else:
            destination.unlink()
    except OSError as e:
        raise CopyError(f"Could not delete old version at {destination}: {e}") from e


def copy_tree(source: Path, destination: Path) -> None:
    """Copy every file and directory under source into destination.

    Relative structure, contents and permission bits are preserved. The parent
    directories of destination (the utilities root included) are created when
    missing. A failure part-way may leave a partial copy behind.

    Raises:
        CopyError: If any file cannot be read or written
    """
    logger.debug("Copying %s -> %s", source, destination)
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copytree(source, destination, symlinks=True, dirs_exist_ok=True)
    except shutil.Error as e:
        failures = "; ".join(f"{src}: {reason}" for src, _dst, reason in e.args[0])
        raise CopyError(f"Error copying files into {destination}: {failures}") from e
    except OSError as e:
        raise CopyError(f"Error copying files into {destination}: {e}") from e
