"""Tests for commitgen.message normalizer and validator."""

import itertools

import pytest

from commitgen.llm.exceptions import InvalidCommitMessageError
from commitgen.message import TRANSFORMS, ensure_valid, is_valid, normalize
from commitgen.message.normalizer import (
    first_line,
    hyphenate_scope_slashes,
    lowercase_header,
    strip_preamble,
    strip_quotes,
    strip_trailing_parenthetical,
    strip_trailing_period,
    strip_whitespace,
)

VALID_MESSAGES = [
    "feat(auth): implement oauth2 login flow",
    "fix(parser): handle empty input, null bytes and eof",
    "docs(readme): mention user@example.com in contact section",
    "style(ui): align buttons in settings/profile page",
    "refactor(core.utils): extract helper_fn from v1.2 module",
    "test(api-v2): cover 404 path",
    "chore(deps): bump typer to 0.12",
]

RAW_OUTPUTS = [
    '"feat(auth): add login."',
    "Here is a commit message: feat(Auth): add login",
    "I suggest: `fix(api/v2): handle timeouts (closes #12)`",
    "  'Suggested commit: docs(README): update install steps.'  ",
    "Sure! Here's the commit message:\n\nfeat(cli): add --detailed flag\n\nThis adds stats.",
    "Feat(Auth): Capitalized type",
    "nothing useful here",
    "",
    '""',
    "fix(x): y.. (note).",
]

# Layered wrappers that need more than one pass of the transform chain
NESTED_OUTPUTS = [
    '  "Here is: `Feat(API/v2): add retries (see #1).`"  ',
    "'''feat(a): b'''",
    "Sure. Sure! here's: fix(A/B/C): y (x) (y) .",
    "“Commit message: docs(Guide): update.”",
    "feat(x): (only a remark)",
    "feat(x): y (a).",
    "here is\nfeat(a): b",
    "Here is a message with no header.",
    ":::",
    "\n\n  \n",
    '"\'`chore(Deps/Dev): bump.`\'"',
]


class TestIsValid:
    """Tests for is_valid function."""

    @pytest.mark.parametrize("message", VALID_MESSAGES)
    def test_accepts_valid_messages(self, message):
        """Test that well-formed headers are accepted."""
        assert is_valid(message)

    @pytest.mark.parametrize(
        "message",
        [
            "feat: missing scope",
            "Feat(auth): Capitalized type",
            "feature(auth): unknown type",
            "perf(db): type outside the allowed set",
            "feat(): empty scope",
            "feat(auth):missing space",
            "feat(auth): ",
            "feat(auth): trailing period.",
            "feat(auth): trailing space ",
            "feat(auth): has (parens)",
            "feat(auth): emoji 🎉",
            "feat(api/v2): slash in scope",
            "feat(Auth): uppercase scope",
            "feat(auth): line one\nline two",
            "feat(auth): ends with newline\n",
            "",
        ],
    )
    def test_rejects_invalid_messages(self, message):
        """Test that malformed headers are rejected."""
        assert not is_valid(message)

    def test_no_length_cap(self):
        """Test that long descriptions are still accepted."""
        assert is_valid("feat(auth): " + "word " * 60 + "end")


class TestEnsureValid:
    """Tests for ensure_valid function."""

    def test_returns_message(self):
        """Test that valid messages are returned unchanged."""
        assert ensure_valid(VALID_MESSAGES[0]) == VALID_MESSAGES[0]

    def test_raises_on_invalid(self):
        """Test that invalid messages raise InvalidCommitMessageError."""
        with pytest.raises(InvalidCommitMessageError) as exc_info:
            ensure_valid("feat: missing scope")

        assert "conventional commit format" in str(exc_info.value)


class TestTransforms:
    """Tests for the individual cleanup steps."""

    def test_strip_quotes(self):
        """Test that one matching pair of quotes is removed."""
        assert strip_quotes('"feat(a): b"') == "feat(a): b"
        assert strip_quotes("`feat(a): b`") == "feat(a): b"
        assert strip_quotes('""feat(a): b""') == '"feat(a): b"'

    def test_strip_quotes_requires_matching_pair(self):
        """Test that unbalanced quotes are left alone."""
        assert strip_quotes('"feat(a): b') == '"feat(a): b'
        assert strip_quotes("'feat(a): b\"") == "'feat(a): b\""

    def test_strip_preamble_before_header(self):
        """Test that chatter before the header is dropped."""
        assert strip_preamble("Here is the commit message: feat(a): b") == "feat(a): b"
        assert strip_preamble("I would suggest fix(a): b") == "fix(a): b"
        assert strip_preamble("SUGGESTED COMMIT: docs(a): b") == "docs(a): b"

    def test_strip_preamble_drops_closing_quote(self):
        """Test that a quoted header after a preamble loses its closing quote."""
        assert strip_preamble("Here's my suggestion: `feat(a): b`") == "feat(a): b"

    def test_strip_preamble_without_header(self):
        """Test that only the phrase goes when no header follows."""
        assert strip_preamble("Commit message: add things") == "add things"

    def test_strip_preamble_leaves_headers_alone(self):
        """Test that text without a preamble is unchanged."""
        assert strip_preamble("feat(a): here is b") == "feat(a): here is b"

    def test_first_line(self):
        """Test that only the first non-blank line is kept."""
        assert first_line("\n\nfeat(a): b\nmore") == "feat(a): b"
        assert first_line("   ") == "   "

    def test_strip_trailing_period(self):
        """Test that one trailing period is removed."""
        assert strip_trailing_period("feat(a): b.") == "feat(a): b"
        assert strip_trailing_period("feat(a): v1.2") == "feat(a): v1.2"

    def test_strip_trailing_parenthetical(self):
        """Test that a parenthetical after the description is removed."""
        assert strip_trailing_parenthetical("fix(a): b (closes #1)") == "fix(a): b"

    def test_strip_trailing_parenthetical_keeps_scope(self):
        """Test that the scope is never removed."""
        assert strip_trailing_parenthetical("feat(auth)") == "feat(auth)"
        assert strip_trailing_parenthetical("feat(auth): (only remark)") == "feat(auth): (only remark)"

    def test_lowercase_header(self):
        """Test that the type(scope) prefix is lower-cased."""
        assert lowercase_header("feat(UserAuth): Add Login") == "feat(userauth): Add Login"
        assert lowercase_header("Fix(api): b") == "fix(api): b"
        assert lowercase_header("feat(api): b") == "feat(api): b"

    def test_hyphenate_scope_slashes(self):
        """Test that slashes in the scope become hyphens."""
        assert hyphenate_scope_slashes("feat(api/v2/users): b/c") == "feat(api-v2-users): b/c"
        assert hyphenate_scope_slashes("feat(api): b/c") == "feat(api): b/c"

    def test_strip_whitespace(self):
        """Test that surrounding whitespace is trimmed."""
        assert strip_whitespace("  feat(a): b \n") == "feat(a): b"

    def test_quotes_before_preamble(self):
        """Test that quote stripping runs before preamble stripping."""
        assert TRANSFORMS.index(strip_quotes) < TRANSFORMS.index(strip_preamble)


class TestNormalize:
    """Tests for the normalize pipeline."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ('"feat(auth): add login."', "feat(auth): add login"),
            ("Here is a commit message: feat(Auth): add login", "feat(auth): add login"),
            ("I suggest: `fix(api/v2): handle timeouts (closes #12)`", "fix(api-v2): handle timeouts"),
            ("  'Suggested commit: docs(README): update install steps.'  ", "docs(readme): update install steps"),
            (
                "Sure! Here's the commit message:\n\nfeat(cli): add --detailed flag\n\nThis adds stats.",
                "feat(cli): add --detailed flag",
            ),
            ("fix(x): y.. (note).", "fix(x): y"),
        ],
    )
    def test_cleans_model_output(self, raw, expected):
        """Test that typical model chatter is cleaned into a valid header."""
        result = normalize(raw)
        assert result == expected
        assert is_valid(result)

    @pytest.mark.parametrize("raw", RAW_OUTPUTS + VALID_MESSAGES + NESTED_OUTPUTS)
    def test_idempotent(self, raw):
        """Test that normalizing twice equals normalizing once."""
        once = normalize(raw)
        assert normalize(once) == once

    def test_idempotent_over_combined_wrappers(self):
        """Test idempotence for every mix of quotes, lead-ins, headers and trailers."""
        quotes = [("", ""), ('"', '"'), ("'", "'"), ("`", "`"), ("“", "”")]
        lead_ins = ["", "Here is: ", "Sure! Suggested commit message: ", "I'd recommend "]
        headers = ["feat(auth)", "Fix(API/v2)", "DOCS(Read.Me)", "chore()", "update"]
        trailers = ["", ".", " (closes #3).", " (a) (b)", "\n\nBody text.", "  "]

        for (left, right), lead_in, header, trailer in itertools.product(quotes, lead_ins, headers, trailers):
            raw = f"{left}{lead_in}{header}: add thing{trailer}{right}"
            once = normalize(raw)
            assert normalize(once) == once, raw

    def test_layered_wrappers_are_peeled(self):
        """Test that quotes inside a lead-in inside whitespace all come off."""
        result = normalize(NESTED_OUTPUTS[0])

        assert result == "feat(api-v2): add retries"
        assert is_valid(result)

    @pytest.mark.parametrize("message", VALID_MESSAGES)
    def test_valid_messages_are_fixed_points(self, message):
        """Test that already-valid messages are left unchanged."""
        assert normalize(message) == message

    def test_capitalized_type_is_repaired(self):
        """Test that a capitalized header becomes valid after normalizing."""
        assert normalize("Feat(Auth): Capitalized type") == "feat(auth): Capitalized type"

    def test_empty_input(self):
        """Test that empty input stays empty."""
        assert normalize("") == ""
        assert normalize('""') == ""
