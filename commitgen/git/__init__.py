"""Git change collection for commitgen.

This package provides:
- exceptions: GitError, NotARepositoryError
- runner: _run_git_command, get_head_hash, get_repo_root
- status: get_status
- diff: ChangeSummary, count_changes, get_staged_diff, get_staged_files
- collector: collect_changes, collect_staged_files
"""

from commitgen.git.exceptions import (
    GitError,
    NotARepositoryError,
)

from commitgen.git.runner import (
    _run_git_command,
    get_head_hash,
    get_repo_root,
)

from commitgen.git.status import get_status

from commitgen.git.diff import (
    ChangeSummary,
    count_changes,
    get_staged_diff,
    get_staged_files,
)

from commitgen.git.collector import (
    collect_changes,
    collect_staged_files,
)


__all__ = [
    # Exceptions
    "GitError",
    "NotARepositoryError",
    # Runner
    "_run_git_command",
    "get_head_hash",
    "get_repo_root",
    # Status
    "get_status",
    # Diff
    "ChangeSummary",
    "count_changes",
    "get_staged_diff",
    "get_staged_files",
    # Collector
    "collect_changes",
    "collect_staged_files",
]
