"""Block tree to markdown engine: classification, syntax cleaning and rendering."""

from ripbullets.markdown.classifier import (
    BlockKind,
    classify_content,
    contains_table,
    is_code_fence,
    is_preformatted_content,
    is_property_line,
)
from ripbullets.markdown.cleaner import clean_logseq_syntax
from ripbullets.markdown.renderer import process_block, transform_block_tree

__all__ = [
    "BlockKind",
    "classify_content",
    "contains_table",
    "is_code_fence",
    "is_preformatted_content",
    "is_property_line",
    "clean_logseq_syntax",
    "process_block",
    "transform_block_tree",
]
