"""Render a Logseq block tree as clean markdown.

The renderer walks the tree depth-first. Top-level blocks become
paragraphs, nested blocks become list items indented two spaces per level
below the first. Tree shape survives only as indentation in the output.
"""

from typing import Optional, Sequence

from ripbullets.models.block import Block
from ripbullets.models.config import TransformOptions
from ripbullets.markdown.classifier import BlockKind, classify_content
from ripbullets.markdown.cleaner import clean_logseq_syntax, collapse_blank_lines


INDENT = "  "
BULLET = "- "

DEFAULT_OPTIONS = TransformOptions()


def _render_lines(text: str, depth: int, options: TransformOptions) -> list[str]:
    """Lay out one block's text at the given depth.

    Paragraph blocks are emitted as-is followed by a blank line. List items
    get the bullet on the first line and continuation lines aligned under
    the bullet's text.
    """
    if depth == 0 and options.remove_top_level_bullets:
        return [text, ""]

    level = depth - 1 if options.remove_top_level_bullets else depth
    indent = INDENT * max(level, 0)
    marker = BULLET if (options.keep_nested_bullets or depth == 0) else ""
    continuation = indent + " " * len(marker)

    first, *rest = text.split("\n")
    lines = [f"{indent}{marker}{first}"]
    lines.extend(f"{continuation}{line}" for line in rest)
    return lines


def _render_children(block: Block, depth: int, options: TransformOptions) -> list[str]:
    lines: list[str] = []
    for child in block.children:
        lines.extend(process_block(child, depth + 1, False, options))
    return lines


def process_block(
    block: Block,
    depth: int,
    is_first_top_level: bool,
    options: Optional[TransformOptions] = None,
) -> list[str]:
    """Process a block and its children recursively.

    Args:
        block: The block to process
        depth: Current nesting depth (0 = top level)
        is_first_top_level: Whether this is the first top-level block; only
            that block may be dropped as page properties
        options: Rendering switches (defaults when omitted)

    Returns:
        Output lines for the block and its whole subtree
    """
    options = options or DEFAULT_OPTIONS
    lines: list[str] = []
    content = block.content or ""

    if content.strip():
        kind = classify_content(content, allow_property=is_first_top_level and depth == 0)

        if kind is BlockKind.PROPERTY:
            # Page properties: drop the block, keep what hangs under it
            return _render_children(block, depth, options)

        if kind is BlockKind.CODE_FENCE:
            # Fences are leaves and are never cleaned
            return _render_lines(content, depth, options)

        if kind is BlockKind.PREFORMATTED:
            lines.extend(_render_lines(content, depth, options))
        else:
            cleaned = clean_logseq_syntax(content)
            if cleaned:
                lines.extend(_render_lines(cleaned, depth, options))

    if block.children:
        lines.extend(_render_children(block, depth, options))

        # Separate top-level sections that had subtrees
        if depth == 0 and lines and lines[-1] != "":
            lines.append("")

    return lines


def transform_block_tree(
    blocks: Sequence[Block],
    options: Optional[TransformOptions] = None,
) -> str:
    """Transform a Logseq block tree into clean markdown.

    Args:
        blocks: Top-level blocks in document order
        options: Rendering switches (defaults when omitted)

    Returns:
        Clean markdown (empty string when nothing renders)

    Examples:
        >>> page = [Block("type:: journal", [Block("Hello [[World]] #tag")])]
        >>> transform_block_tree(page)
        '- Hello World'
    """
    all_lines: list[str] = []

    for index, block in enumerate(blocks):
        all_lines.extend(process_block(block, 0, index == 0, options))

    return collapse_blank_lines("\n".join(all_lines)).strip()
