"""Logseq page file parser.

Reads Logseq's outline format (indented ``- `` bullets, continuation lines,
``key:: value`` properties) into the same Block forest the HTTP API
returns, so pages on disk and pages in a running Logseq render alike.
"""

from pathlib import Path

from ripbullets.models.block import Block


# Bookkeeping properties Logseq writes into files but hides in the editor
HIDDEN_PROPERTIES = ("id::", "collapsed::")


def parse_outline(markdown: str) -> list[Block]:
    """Parse Logseq markdown into a block forest.

    Lines before the first bullet (page-level properties such as
    ``type:: journal``) become the first root block, mirroring the
    properties block Logseq keeps at the top of every page.

    Args:
        markdown: Contents of a Logseq page file

    Returns:
        Root blocks in document order

    Examples:
        >>> blocks = parse_outline("- Parent\\n  - Child")
        >>> blocks[0].children[0].content
        'Child'
    """
    if not markdown.strip():
        return []

    lines = markdown.replace("\r\n", "\n").split("\n")
    indent_str = _detect_indentation(lines)
    frontmatter, blocks = _parse_blocks(lines, indent_str)

    page_properties = "\n".join(frontmatter).strip()
    if page_properties:
        blocks.insert(0, Block(content=page_properties))

    return blocks


def parse_outline_file(path: Path) -> list[Block]:
    """Read and parse a Logseq page file (UTF-8)."""
    return parse_outline(path.read_text(encoding="utf-8"))


def _is_bullet_line(line: str) -> bool:
    """Check if a line is a bullet (including empty bullets)."""
    stripped = line.lstrip()
    return stripped == "-" or stripped.startswith("- ")


def _is_hidden_property(line: str) -> bool:
    return line.strip().startswith(HIDDEN_PROPERTIES)


def _parse_blocks(lines: list[str], indent_str: str) -> tuple[list[str], list[Block]]:
    """Parse lines into hierarchical blocks.

    A block is a bullet line plus every following line up to the next
    bullet at the same or a shallower level, or a deeper bullet (a child).
    Lines inside a code fence are never treated as bullets.

    Returns:
        Tuple of (frontmatter_lines, root_blocks)
    """
    frontmatter: list[str] = []
    root_blocks: list[Block] = []
    # (indent_level, block) for the current ancestry
    stack: list[tuple[int, Block]] = []

    i = 0
    while i < len(lines):
        line = lines[i]

        # Only reached before the first bullet; later non-bullet lines are
        # consumed as continuation content below
        if not _is_bullet_line(line):
            frontmatter.append(line)
            i += 1
            continue

        leading = line[: len(line) - len(line.lstrip())]
        indent_level = leading.count(indent_str)
        stripped = line.lstrip()
        first_line = "" if stripped == "-" else stripped[2:]

        content = [first_line]
        # Parallel to content: True for fence markers and fenced lines
        fenced = [False]
        base_indent = leading + "  "
        in_code_fence = first_line.count("```") % 2 == 1

        j = i + 1
        while j < len(lines):
            next_line = lines[j]

            if not in_code_fence and _is_bullet_line(next_line):
                next_leading = next_line[: len(next_line) - len(next_line.lstrip())]
                next_level = next_leading.count(indent_str)
                if next_level > indent_level:
                    break
                if next_leading == indent_str * next_level:
                    break
                # Mixed indentation: bullet-like continuation content

            if next_line.lstrip().startswith("```"):
                in_code_fence = not in_code_fence
                fenced.append(True)
            else:
                fenced.append(in_code_fence)

            if next_line.startswith(base_indent):
                content.append(next_line[len(base_indent):])
            else:
                content.append(next_line.lstrip())
            j += 1

        # Trailing blank lines belong to the gap, not the block
        while len(content) > 1 and not content[-1].strip():
            content.pop()
            fenced.pop()

        # Fence interiors are kept byte for byte
        text = "\n".join(
            part
            for part, in_fence in zip(content, fenced)
            if in_fence or not _is_hidden_property(part)
        )

        while stack and stack[-1][0] >= indent_level:
            stack.pop()

        if stack and stack[-1][0] == indent_level - 1:
            block = stack[-1][1].add_child(text)
        else:
            # Root, or malformed indentation that skips a level. Only this
            # block is lifted; its later siblings still find their parent.
            block = Block(content=text)
            root_blocks.append(block)
        stack.append((indent_level, block))

        i = j

    return frontmatter, root_blocks


def _detect_indentation(lines: list[str]) -> str:
    """Detect the indentation unit from the shallowest indented bullet.

    Falls back to two spaces when no bullet is indented.
    """
    indents = [
        line[: len(line) - len(line.lstrip())]
        for line in lines
        if line.strip() and _is_bullet_line(line) and line != line.lstrip()
    ]
    if not indents:
        return "  "
    return min(indents, key=len)
