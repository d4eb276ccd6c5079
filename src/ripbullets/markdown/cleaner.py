"""Removal of Logseq-specific inline syntax from prose blocks.

Rules run in order over the whole block text. Syntax removal comes first
so that the whitespace rules can tidy the gaps it leaves behind. Newlines
are preserved throughout; only horizontal whitespace is collapsed.
"""

import re


# (pattern, replacement) pairs applied in order
SYNTAX_RULES: list[tuple[re.Pattern, str]] = [
    # {{embed [[page]]}} / {{embed ((block-ref))}}
    (re.compile(r"\{\{embed\s+\[\[[^\]]+\]\]\}\}"), ""),
    (re.compile(r"\{\{embed\s+\(\([^)]+\)\)\}\}"), ""),
    # Any other macro, single line, no nested braces
    (re.compile(r"\{\{[^}\n]+\}\}"), ""),
    # [[Page Link]] -> Page Link (but leave #[[multi word tag]] for the tag rule)
    (re.compile(r"(?<!#)\[\[([^\]]+)\]\]"), r"\1"),
    # ((block-ref))
    (re.compile(r"\(\([^)]+\)\)"), ""),
    # #[[multi word tag]] and #tag
    (re.compile(r"#\[\[[^\]]+\]\]"), ""),
    (re.compile(r"#[a-zA-Z0-9_-]+"), ""),
]

_HORIZONTAL_WHITESPACE = re.compile(r"[^\S\n]+")
_EXCESS_NEWLINES = re.compile(r"\n{3,}")


def collapse_blank_lines(text: str) -> str:
    """Limit consecutive blank lines to one (3+ newlines become 2)."""
    return _EXCESS_NEWLINES.sub("\n\n", text)


def _strip_syntax(content: str) -> str:
    """Apply SYNTAX_RULES in order, repeating passes until none matches.

    Every substitution shortens the text, so the loop terminates.
    """
    while True:
        changed = False
        for pattern, replacement in SYNTAX_RULES:
            content, count = pattern.subn(replacement, content)
            changed = changed or count > 0
        if not changed:
            return content


def clean_logseq_syntax(content: str) -> str:
    """Clean Logseq syntax from block content.

    - ``{{embed ...}}`` and other ``{{macros}}`` -> removed
    - ``[[Page Link]]`` -> ``Page Link``
    - ``((block-ref))`` -> removed
    - ``#tag`` and ``#[[multi word tag]]`` -> removed
    - runs of spaces/tabs -> single space, trailing spaces stripped per line
    - at most one blank line in a row, outer whitespace trimmed

    Cleaning is idempotent: cleaning the result again returns it unchanged.

    Args:
        content: Raw block text

    Returns:
        Cleaned text (possibly empty)

    Examples:
        >>> clean_logseq_syntax("Read [[Deep Work]] #books")
        'Read Deep Work'
    """
    cleaned = _strip_syntax(content)

    cleaned = _HORIZONTAL_WHITESPACE.sub(" ", cleaned)
    cleaned = "\n".join(line.rstrip() for line in cleaned.split("\n"))
    cleaned = collapse_blank_lines(cleaned)

    return cleaned.strip()
