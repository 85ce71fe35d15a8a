"""Fetch a utility's source tree into a scratch directory."""

import logging
import tempfile
from pathlib import Path

from sf_utils.core.catalog import UtilityDescriptor
from sf_utils.core.errors import FetchError
from sf_utils.core.git.abc import Git
from sf_utils.core.user_feedback import UserFeedback

logger = logging.getLogger(__name__)

TEMP_DIR_PREFIX = "add-sf-utils-"


def create_temp_clone_dir(scratch_root: Path | None) -> Path:
    """Create a fresh, empty directory unique to this run.

    Args:
        scratch_root: Parent directory, or None for the system temp location
    """
    if scratch_root is not None:
        scratch_root.mkdir(parents=True, exist_ok=True)
    return Path(tempfile.mkdtemp(prefix=TEMP_DIR_PREFIX, dir=scratch_root))


def fetch_utility(
    git: Git,
    feedback: UserFeedback,
    utility: UtilityDescriptor,
    temp_dir: Path,
) -> None:
    """Clone the utility's branch into temp_dir.

    Raises:
        FetchError: If git cannot clone the branch
    """
    logger.debug(
        "Cloning %s (branch=%s) into %s", utility.source_url, utility.branch_ref, temp_dir
    )
    try:
        with feedback.status(f"Cloning {utility.name} from {utility.source_url}"):
            git.clone_branch(utility.source_url, utility.branch_ref, temp_dir)
    except RuntimeError as e:
        raise FetchError(f"Error cloning repository: {e}") from e
    feedback.success(f"✓ {utility.name} cloned successfully.")
