"""Prompt templates for commit message generation."""

from commitgen.config import DEFAULT_MAX_DIFF_CHARS

# System prompt for chat-style providers
SYSTEM_PROMPT = """You are a strict conventional-commit generator.
Reply with exactly one line in the form type(scope): description.
Never add explanations, quotes, markdown or a trailing period."""

USER_PROMPT_TEMPLATE = """As an expert developer, analyze these git changes and suggest a concise, meaningful commit message following the Conventional Commits format.
The message must be in the format: type(scope): description

Files changed:
{files_changed}

Changes:
{diff}

Rules:
1. type is one of: feat, fix, docs, style, refactor, test, chore
2. scope is a short lowercase name of the affected area (e.g. auth, api, cli, parser)
3. description is lowercase, in imperative mood, under 72 characters, with no period at the end
4. Focus on what changed and why, the way a human developer would write it

Examples:
feat(auth): add oauth2 login flow
fix(parser): handle empty input without crashing
docs(readme): document installation steps
refactor(api): extract request validation into helper

Return only the commit message, nothing else."""


def build_prompt(
    files_changed: str,
    diff_text: str,
    max_diff_chars: int = DEFAULT_MAX_DIFF_CHARS,
) -> str:
    """Build the generation prompt.

    The diff is cut at exactly max_diff_chars characters, even mid-line.

    Args:
        files_changed: Newline-separated staged file paths.
        diff_text: The staged diff.
        max_diff_chars: Maximum number of diff characters to include.

    Returns:
        The formatted prompt.

    Raises:
        ValueError: If max_diff_chars is negative.
    """
    if max_diff_chars < 0:
        raise ValueError(f"max_diff_chars must be non-negative, got {max_diff_chars}")

    return USER_PROMPT_TEMPLATE.format(
        files_changed=files_changed.strip(),
        diff=diff_text[:max_diff_chars],
    )
