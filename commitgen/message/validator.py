"""Conventional Commits header validation.

A header is accepted only in the canonical form the normalizer produces:
lowercase type and scope, and a description that does not end in a period
or whitespace.
"""

import re

from commitgen.llm.exceptions import InvalidCommitMessageError

COMMIT_TYPES = ("feat", "fix", "docs", "style", "refactor", "test", "chore")

COMMIT_MESSAGE_PATTERN = re.compile(
    r"^(?P<type>" + "|".join(COMMIT_TYPES) + r")"
    r"\((?P<scope>[a-z0-9\-_.]+)\)"
    r": (?P<description>[a-zA-Z0-9 \-_.,@/]*[a-zA-Z0-9\-_,@/])\Z"
)


def is_valid(message: str) -> bool:
    """Check a commit message against the type(scope): description grammar."""
    return COMMIT_MESSAGE_PATTERN.match(message) is not None


def ensure_valid(message: str) -> str:
    """Return the message unchanged if valid.

    Raises:
        InvalidCommitMessageError: If the message does not match the grammar.
    """
    if not is_valid(message):
        raise InvalidCommitMessageError(
            f"Generated message does not follow conventional commit format: {message!r}"
        )
    return message
