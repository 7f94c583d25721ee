"""Git command runner.

Contains:
- _run_git_command: Run a git command and return its output
- get_head_hash: Get the commit hash of HEAD
- get_repo_root: Get the top-level directory of the working tree
"""

import subprocess
from pathlib import Path
from typing import Optional

from commitgen.git.exceptions import GitError, NotARepositoryError


def _run_git_command(args: list[str]) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.

    Returns:
        The stdout of the git command, with trailing newlines kept.

    Raises:
        NotARepositoryError: If git is not installed.
        GitError: If the command fails.
    """
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        raise GitError(f"Git command failed: git {' '.join(args)}\n{stderr}")
    except FileNotFoundError:
        raise NotARepositoryError("Git is not installed or not in PATH.")


def get_head_hash() -> Optional[str]:
    """Get the commit hash of HEAD.

    Returns:
        The full hash, or None if there is no HEAD yet or git fails.
    """
    try:
        return _run_git_command(["rev-parse", "HEAD"]).strip() or None
    except GitError:
        return None


def get_repo_root() -> Optional[Path]:
    """Get the top-level directory of the current working tree.

    Returns:
        The repository root, or None outside a repository.
    """
    try:
        root = _run_git_command(["rev-parse", "--show-toplevel"]).strip()
    except GitError:
        return None
    return Path(root) if root else None
