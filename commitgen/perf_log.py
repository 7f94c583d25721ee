"""Append-only performance log for generation attempts.

Each attempt becomes one JSON line in the log file. The file is only ever
appended to; commitgen never reads it back.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Optional

from pydantic import BaseModel, Field

from commitgen.git import collect_staged_files, get_head_hash, get_repo_root

logger = logging.getLogger(__name__)


class PerformanceLogEntry(BaseModel):
    """One generation attempt."""

    provider: str
    duration_ms: float
    success: bool
    tokens_used: Optional[int] = None
    message: Optional[str] = None
    error: Optional[str] = None
    timestamp: str  # ISO format, UTC
    git_hash: Optional[str] = None
    files_changed: list[str] = Field(default_factory=list)


def resolve_log_file(
    log_file: Path,
    repo_root_fn: Callable[[], Optional[Path]] = get_repo_root,
) -> Path:
    """Anchor a relative log path at the repository root.

    Runs from a subdirectory write to the same file as runs from the top.
    Absolute paths are returned unchanged, as are relative ones outside a
    repository.
    """
    log_file = Path(log_file)
    if log_file.is_absolute():
        return log_file
    root = repo_root_fn()
    return root / log_file if root else log_file


class PerformanceLogger:
    """Writes PerformanceLogEntry records as newline-delimited JSON."""

    def __init__(
        self,
        log_file: Path,
        staged_files_fn: Callable[[], list[str]] = collect_staged_files,
        head_hash_fn: Callable[[], Optional[str]] = get_head_hash,
    ):
        """Initialize the logger.

        Args:
            log_file: Path of the JSONL file to append to.
            staged_files_fn: Returns the staged file list at record time.
            head_hash_fn: Returns the current commit hash.
        """
        self.log_file = Path(log_file)
        self._staged_files_fn = staged_files_fn
        self._head_hash_fn = head_hash_fn

    def build_entry(
        self,
        provider: str,
        duration_ms: float,
        success: bool,
        tokens_used: Optional[int] = None,
        message: Optional[str] = None,
        error: Optional[str] = None,
    ) -> PerformanceLogEntry:
        """Create an entry enriched with timestamp, HEAD hash and staged files."""
        return PerformanceLogEntry(
            provider=provider,
            duration_ms=round(duration_ms, 2),
            success=success,
            tokens_used=tokens_used,
            message=message,
            error=error,
            timestamp=datetime.now(timezone.utc).isoformat(),
            git_hash=self._head_hash_fn(),
            files_changed=self._staged_files_fn(),
        )

    def record(
        self,
        provider: str,
        duration_ms: float,
        success: bool,
        tokens_used: Optional[int] = None,
        message: Optional[str] = None,
        error: Optional[str] = None,
    ) -> None:
        """Append one entry to the log.

        Write failures are reported as warnings and never raised.
        """
        try:
            entry = self.build_entry(
                provider=provider,
                duration_ms=duration_ms,
                success=success,
                tokens_used=tokens_used,
                message=message,
                error=error,
            )
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.log_file, "a", encoding="utf-8") as f:
                f.write(entry.model_dump_json() + "\n")
        except Exception as e:
            logger.warning("Failed to write performance log %s: %s", self.log_file, e)
