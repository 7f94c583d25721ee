"""Tests for commitgen.perf_log module."""

import json
from datetime import datetime
from pathlib import Path

from commitgen.perf_log import PerformanceLogEntry, PerformanceLogger, resolve_log_file


def _logger(log_file, files=None, git_hash="deadbeef"):
    return PerformanceLogger(
        log_file,
        staged_files_fn=lambda: list(files or []),
        head_hash_fn=lambda: git_hash,
    )


class TestPerformanceLogger:
    """Tests for PerformanceLogger.record."""

    def test_appends_one_json_line(self, temp_dir):
        """Test that a record becomes one JSON line."""
        log_file = temp_dir / "performance.jsonl"
        perf_logger = _logger(log_file, files=["a.py", "b.py"])

        perf_logger.record(provider="cohere", duration_ms=123.4, success=True, tokens_used=30,
                           message="feat(a): b")

        lines = log_file.read_text().splitlines()
        assert len(lines) == 1
        entry = json.loads(lines[0])
        assert entry["provider"] == "cohere"
        assert entry["duration_ms"] == 123.4
        assert entry["success"] is True
        assert entry["tokens_used"] == 30
        assert entry["message"] == "feat(a): b"
        assert entry["error"] is None
        assert entry["git_hash"] == "deadbeef"
        assert entry["files_changed"] == ["a.py", "b.py"]
        datetime.fromisoformat(entry["timestamp"])

    def test_appends_without_truncating(self, temp_dir):
        """Test that existing records are kept."""
        log_file = temp_dir / "performance.jsonl"
        log_file.write_text('{"existing": true}\n')
        perf_logger = _logger(log_file)

        perf_logger.record(provider="cohere", duration_ms=1, success=False, error="boom")
        perf_logger.record(provider="deepseek", duration_ms=2, success=True, message="fix(a): b")

        lines = log_file.read_text().splitlines()
        assert len(lines) == 3
        assert json.loads(lines[0]) == {"existing": True}
        assert json.loads(lines[1])["error"] == "boom"
        assert json.loads(lines[2])["provider"] == "deepseek"

    def test_creates_parent_directory(self, temp_dir):
        """Test that the log directory is created on first write."""
        log_file = temp_dir / ".commitgen" / "nested" / "performance.jsonl"

        _logger(log_file).record(provider="cohere", duration_ms=1, success=True)

        assert log_file.exists()

    def test_write_failure_is_swallowed(self, temp_dir, caplog):
        """Test that a failing write is reported but not raised."""
        blocker = temp_dir / "not_a_dir"
        blocker.write_text("file in the way")
        perf_logger = _logger(blocker / "performance.jsonl")

        perf_logger.record(provider="cohere", duration_ms=1, success=True)

        assert "Failed to write performance log" in caplog.text

    def test_enrichment_failure_is_swallowed(self, temp_dir, caplog):
        """Test that an error while enriching the entry does not propagate."""
        def broken():
            raise RuntimeError("git exploded")

        perf_logger = PerformanceLogger(temp_dir / "p.jsonl", staged_files_fn=broken,
                                        head_hash_fn=lambda: None)

        perf_logger.record(provider="cohere", duration_ms=1, success=True)

        assert "git exploded" in caplog.text
        assert not (temp_dir / "p.jsonl").exists()


class TestPerformanceLogEntry:
    """Tests for the PerformanceLogEntry model."""

    def test_optional_fields_default_to_none(self):
        """Test that optional fields may be omitted."""
        entry = PerformanceLogEntry(
            provider="deepseek", duration_ms=5.0, success=False, timestamp="2026-01-01T00:00:00+00:00"
        )
        assert entry.tokens_used is None
        assert entry.git_hash is None
        assert entry.files_changed == []


class TestResolveLogFile:
    """Tests for resolve_log_file function."""

    def test_relative_path_anchored_at_repo_root(self, temp_dir):
        """Test that runs from a subdirectory share the root's log file."""
        resolved = resolve_log_file(Path(".commitgen") / "performance.jsonl", repo_root_fn=lambda: temp_dir)

        assert resolved == temp_dir / ".commitgen" / "performance.jsonl"

    def test_absolute_path_unchanged(self, temp_dir):
        """Test that an absolute path skips the repository lookup."""
        def unexpected():
            raise AssertionError("repository root should not be looked up")

        log_file = temp_dir / "perf.jsonl"

        assert resolve_log_file(log_file, repo_root_fn=unexpected) == log_file

    def test_outside_repository_keeps_relative_path(self):
        """Test that without a repository root the path is left as given."""
        assert resolve_log_file(Path("perf.jsonl"), repo_root_fn=lambda: None) == Path("perf.jsonl")
