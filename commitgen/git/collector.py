"""Staged change collection.

Contains:
- collect_changes: Check the repository and count staged line changes
- collect_staged_files: Staged file list that degrades to [] on failure
"""

import logging

from commitgen.git.diff import ChangeSummary, count_changes, get_staged_diff, get_staged_files
from commitgen.git.exceptions import GitError
from commitgen.git.status import get_status

logger = logging.getLogger(__name__)


def collect_changes() -> ChangeSummary:
    """Count the lines added and removed by the staged changes.

    "Not a repository" is reported separately from "nothing staged" so the
    caller can tell them apart.

    Returns:
        A ChangeSummary carrying the diff text it counted; empty when
        nothing is staged.

    Raises:
        NotARepositoryError: If the working directory is not a git repository.
        GitError: If reading the staged diff fails.
    """
    get_status()
    return count_changes(get_staged_diff())


def collect_staged_files() -> list[str]:
    """Get the staged file list, or [] if git fails."""
    try:
        return get_staged_files()
    except GitError as e:
        logger.debug("Could not list staged files: %s", e)
        return []
