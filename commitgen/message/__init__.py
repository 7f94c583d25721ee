"""Commit message normalization and validation.

- normalizer: normalize, TRANSFORMS and the individual cleanup steps
- validator: is_valid, ensure_valid, COMMIT_TYPES
"""

from commitgen.message.validator import (
    COMMIT_MESSAGE_PATTERN,
    COMMIT_TYPES,
    ensure_valid,
    is_valid,
)
from commitgen.message.normalizer import (
    TRANSFORMS,
    apply_transforms,
    normalize,
)

__all__ = [
    "COMMIT_MESSAGE_PATTERN",
    "COMMIT_TYPES",
    "ensure_valid",
    "is_valid",
    "TRANSFORMS",
    "apply_transforms",
    "normalize",
]
