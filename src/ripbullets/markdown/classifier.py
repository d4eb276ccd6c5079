"""Lexical classification of block content.

Every predicate looks only at the block's own text. Classification is
line-oriented and heuristic: fences, tables, rules and indented code are
recognized by their leading characters, without parsing Markdown.
"""

import re
from enum import Enum


CODE_FENCE = "```"
HORIZONTAL_RULE = "---"
INDENTED_CODE = "    "

_PROPERTY_PATTERN = re.compile(r"^[a-zA-Z][a-zA-Z0-9_-]*::")


class BlockKind(str, Enum):
    """How a block's content is rendered."""

    PROPERTY = "property"
    CODE_FENCE = "code_fence"
    PREFORMATTED = "preformatted"
    PLAIN = "plain"


def is_code_fence(content: str) -> bool:
    """Check if content opens a code fence.

    Only the opening marker is inspected; a closing fence is not required.
    """
    return content.lstrip().startswith(CODE_FENCE)


def is_property_line(content: str) -> bool:
    """Check if content is a property line (``key:: value``).

    Examples:
        >>> is_property_line("type:: journal")
        True
        >>> is_property_line("1st:: nope")
        False
    """
    return _PROPERTY_PATTERN.match(content.strip()) is not None


def is_preformatted_content(content: str) -> bool:
    """Check if content must keep its whitespace untouched.

    Matches code fences, table rows, horizontal rules and indented code.
    All checks run on the trimmed text.
    """
    trimmed = content.strip()
    return (
        trimmed.startswith(CODE_FENCE)
        or trimmed.startswith("|")
        or trimmed == HORIZONTAL_RULE
        or trimmed.startswith(INDENTED_CODE)
    )


def contains_table(content: str) -> bool:
    """Check if content holds at least two table rows.

    Catches multi-line tables whose first line is ordinary text, which
    ``is_preformatted_content`` would miss.
    """
    table_lines = [
        line for line in content.split("\n")
        if "|" in line and line.strip().startswith("|")
    ]
    return len(table_lines) >= 2


def classify_content(content: str, *, allow_property: bool = True) -> BlockKind:
    """Classify block content.

    Priority: property, code fence, preformatted (or table), plain.

    Args:
        content: Raw block text
        allow_property: When False, property lines are classified by the
            remaining rules. Only the first top-level block may be treated
            as page metadata.

    Returns:
        The block's rendering kind
    """
    if allow_property and is_property_line(content):
        return BlockKind.PROPERTY
    if is_code_fence(content):
        return BlockKind.CODE_FENCE
    if is_preformatted_content(content) or contains_table(content):
        return BlockKind.PREFORMATTED
    return BlockKind.PLAIN
