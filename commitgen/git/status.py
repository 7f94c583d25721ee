"""Git status utilities.

Contains:
- get_status: Get porcelain status lines, doubling as the repository check
"""

from commitgen.git.exceptions import GitError, NotARepositoryError
from commitgen.git.runner import _run_git_command


def get_status() -> list[str]:
    """Get git status output in porcelain format.

    Returns:
        Non-empty status lines.

    Raises:
        NotARepositoryError: If the working directory is not a git repository.
    """
    try:
        output = _run_git_command(["status", "--porcelain"])
    except NotARepositoryError:
        raise
    except GitError:
        raise NotARepositoryError("Not a git repository or git is not installed")
    return [line for line in output.split("\n") if line]
