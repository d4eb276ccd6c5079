"""ripbullets - Copy Logseq pages as clean markdown.

Turns a Logseq block tree into markdown that pastes cleanly into documents
that know nothing about outliner syntax: top-level blocks become
paragraphs, nested blocks become indented list items, and Logseq-only
syntax (page links, tags, block references, macros) is stripped. Code
fences and tables are kept verbatim.

Example:
    >>> from ripbullets import Block, transform
    >>> transform([Block("type:: journal", [Block("Hello [[World]] #tag")])])
    '- Hello World'
"""

from ripbullets.models.block import Block
from ripbullets.models.config import TransformOptions
from ripbullets.markdown.renderer import transform_block_tree

__version__ = "0.1.0"

transform = transform_block_tree

__all__ = [
    "Block",
    "TransformOptions",
    "transform",
    "transform_block_tree",
]
