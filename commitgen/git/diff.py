"""Git diff utilities.

Contains:
- get_staged_diff: Get the full staged diff text
- get_staged_files: Get the staged file paths
- count_changes: Count added and removed lines in a diff
"""

import re
from dataclasses import dataclass, field

from commitgen.git.runner import _run_git_command

# Only a single leading +/- counts; ++ and -- prefixes are treated as headers
_ADDED_LINE = re.compile(r"^\+(?!\+)", re.MULTILINE)
_REMOVED_LINE = re.compile(r"^-(?!-)", re.MULTILINE)


@dataclass(frozen=True)
class ChangeSummary:
    """Line counts for the staged diff, and the diff text they were counted from."""

    additions: int = 0
    deletions: int = 0
    diff: str = field(default="", repr=False, compare=False)

    @property
    def is_empty(self) -> bool:
        return self.additions == 0 and self.deletions == 0


def count_changes(diff_text: str) -> ChangeSummary:
    """Count added and removed lines in a unified diff.

    Args:
        diff_text: Output of git diff.

    Returns:
        A ChangeSummary with the counts.
    """
    return ChangeSummary(
        additions=len(_ADDED_LINE.findall(diff_text)),
        deletions=len(_REMOVED_LINE.findall(diff_text)),
        diff=diff_text,
    )


def get_staged_diff() -> str:
    """Get the staged diff.

    Raises:
        GitError: If git fails.
    """
    return _run_git_command(["diff", "--staged"])


def get_staged_files() -> list[str]:
    """Get list of staged file paths, in the order git reports them.

    Raises:
        GitError: If git fails.
    """
    output = _run_git_command(["diff", "--staged", "--name-only"])
    return [line for line in output.split("\n") if line]
