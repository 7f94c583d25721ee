"""Shared test fixtures and configuration."""

import logging
import tempfile
from pathlib import Path
from typing import Optional

import pytest

from commitgen.config import LLMProvider
from commitgen.llm.base import BaseLLMProvider, LLMResult
from commitgen.llm.exceptions import ProviderHTTPError


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Keep configure_logging() handlers from leaking between tests."""
    yield
    package_logger = logging.getLogger("commitgen")
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config_dir(temp_dir, mocker):
    """Point the global config directory at a temporary location."""
    config_dir = temp_dir / ".commitgen"
    mocker.patch("commitgen.global_config._CONFIG_DIR", config_dir)
    return config_dir


@pytest.fixture
def sample_diff():
    """Sample staged diff with two files."""
    return """diff --git a/auth/login.py b/auth/login.py
index 1234567..abcdefg 100644
--- a/auth/login.py
+++ b/auth/login.py
@@ -1,5 +1,8 @@
 def login(user):
-    return check_password(user)
+    token = request_oauth_token(user)
+    return validate(token)
+
diff --git a/README.md b/README.md
index 1111111..2222222 100644
--- a/README.md
+++ b/README.md
@@ -1,2 +1,2 @@
-Old title
+New title
"""


@pytest.fixture
def sample_staged_files():
    """Staged files matching sample_diff."""
    return ["auth/login.py", "README.md"]


class FakeProvider(BaseLLMProvider):
    """Provider that returns canned text or raises, and counts calls."""

    default_model = "fake-model"

    def __init__(
        self,
        provider: LLMProvider,
        text: Optional[str] = None,
        error: Optional[Exception] = None,
        tokens_used: Optional[int] = 12,
    ):
        super().__init__(api_key="fake-key")
        self.provider = provider
        self.text = text
        self.error = error
        self.tokens_used = tokens_used
        self.calls = []

    def generate(self, prompt: str) -> LLMResult:
        self.calls.append(prompt)
        if self.error is not None:
            raise self.error
        return LLMResult(text=self.text, model=self.model, tokens_used=self.tokens_used)


@pytest.fixture
def make_provider():
    """Factory for FakeProvider instances."""

    def _make(provider, text=None, error=None, tokens_used=12):
        return FakeProvider(provider, text=text, error=error, tokens_used=tokens_used)

    return _make


@pytest.fixture
def failing_provider(make_provider):
    """Factory for a provider whose call always raises."""

    def _make(provider):
        return make_provider(provider, error=ProviderHTTPError("connection refused"))

    return _make
