"""Cleanup of raw model output into a commit message header.

Models wrap their answer in quotes, prefix it with chatter ("Here is a
commit message: ..."), add a trailing period or a parenthetical remark,
or capitalize the scope. Each cleanup is a small pure function; TRANSFORMS
fixes their order, and normalize() applies the whole chain until the text
stops changing.
"""

import re
from functools import reduce

from commitgen.message.validator import COMMIT_TYPES

_QUOTE_PAIRS = {
    '"': '"',
    "'": "'",
    "`": "`",
    "“": "”",
    "‘": "’",
}

_PREAMBLE = re.compile(
    r"^\s*(?:"
    r"here(?:'s| is)"
    r"|i (?:would |'d )?(?:suggest|recommend)"
    r"|suggested commit(?: message)?"
    r"|commit message"
    r"|sure"
    r")\b",
    re.IGNORECASE,
)

_HEADER_START = re.compile(r"\b(?:" + "|".join(COMMIT_TYPES) + r")\(", re.IGNORECASE)

# type(scope) at the start of the message
_HEADER_PREFIX = re.compile(r"^(?P<type>[A-Za-z]+)\((?P<scope>[^()]*)\)")

_TRAILING_PARENTHETICAL = re.compile(r"\s*\([^()]*\)\s*$")


def strip_quotes(text: str) -> str:
    """Remove one matching pair of surrounding quote characters."""
    if len(text) >= 2 and text[0] in _QUOTE_PAIRS and text[-1] == _QUOTE_PAIRS[text[0]]:
        return text[1:-1]
    return text


def strip_preamble(text: str) -> str:
    """Drop conversational lead-ins such as "Here is the commit message:".

    When a type( header follows the lead-in, everything before it goes.
    Otherwise only the phrase and its punctuation are removed.
    """
    match = _PREAMBLE.match(text)
    if not match:
        return text

    header = _HEADER_START.search(text, match.end())
    if header is None:
        return text[match.end():].lstrip(" \t:,!.-")

    rest = text[header.start():]
    # "... message: `feat(x): y`" leaves the closing quote behind
    opening = text[header.start() - 1] if header.start() > 0 else ""
    if opening in _QUOTE_PAIRS and rest.endswith(_QUOTE_PAIRS[opening]):
        rest = rest[:-1]
    return rest


def first_line(text: str) -> str:
    """Keep only the first non-blank line."""
    for line in text.splitlines():
        if line.strip():
            return line
    return text


def strip_trailing_period(text: str) -> str:
    if text.endswith("."):
        return text[:-1]
    return text


def strip_trailing_parenthetical(text: str) -> str:
    """Remove a "(...)" remark appended after the description.

    The scope is never touched: only text after the first ": " is examined.
    """
    head, sep, description = text.partition(": ")
    if not sep:
        return text
    trimmed = _TRAILING_PARENTHETICAL.sub("", description)
    if not trimmed.strip():
        return text
    return head + sep + trimmed


def lowercase_header(text: str) -> str:
    """Lower-case the type(scope) prefix if it has any capitals."""
    match = _HEADER_PREFIX.match(text)
    if not match:
        return text
    prefix = match.group(0)
    if prefix == prefix.lower():
        return text
    return prefix.lower() + text[match.end():]


def hyphenate_scope_slashes(text: str) -> str:
    """Turn "feat(api/v2): ..." into "feat(api-v2): ..."."""
    match = _HEADER_PREFIX.match(text)
    if not match or "/" not in match.group("scope"):
        return text
    scope = match.group("scope").replace("/", "-")
    return f"{match.group('type')}({scope})" + text[match.end():]


def strip_whitespace(text: str) -> str:
    return text.strip()


# Order matters: quotes hide preambles, preambles hide the header line.
TRANSFORMS = (
    strip_quotes,
    strip_preamble,
    first_line,
    strip_trailing_period,
    strip_trailing_parenthetical,
    lowercase_header,
    hyphenate_scope_slashes,
    strip_whitespace,
)


def apply_transforms(text: str) -> str:
    """Run every transform once, in order."""
    return reduce(lambda value, transform: transform(value), TRANSFORMS, text)


def normalize(raw: str) -> str:
    """Clean raw model output into a candidate commit message.

    The transform chain is repeated until the text is stable, so the result
    is always a fixed point: normalize(normalize(x)) == normalize(x).
    Every pass either shortens the text or only lowers case and swaps
    slashes for hyphens, so the loop terminates.
    """
    text = raw
    while True:
        cleaned = apply_transforms(text)
        if cleaned == text:
            return cleaned
        text = cleaned
