"""Block tree model consumed by the transform engine."""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class Block:
    """Single outline block with its children.

    Blocks are read-only input to the renderer. Depth is never stored on
    the block; it is assigned while the tree is walked.

    Attributes:
        content: Raw block text (may be multi-line or empty)
        children: Child blocks in document order
    """

    content: str = ""
    children: list["Block"] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Block":
        """Build a block tree from a Logseq API ``BlockEntity`` payload.

        Logseq represents children that were not loaded as ``["uuid", "..."]``
        pairs instead of objects; those entries are skipped.

        Args:
            data: Decoded JSON object for one block

        Returns:
            Block with materialized children

        Examples:
            >>> Block.from_dict({"content": "Parent", "children": [{"content": "Child"}]})
            Block(content='Parent', children=[Block(content='Child', children=[])])
        """
        content = data.get("content") or ""
        raw_children = data.get("children") or []

        children = [
            cls.from_dict(child)
            for child in raw_children
            if isinstance(child, dict)
        ]
        return cls(content=content, children=children)

    @classmethod
    def forest_from_payload(cls, payload: Optional[list[Any]]) -> list["Block"]:
        """Build the top-level forest from a ``getPageBlocksTree`` response.

        Args:
            payload: Decoded JSON list (``None`` when Logseq has no page open)

        Returns:
            List of root blocks (empty when there is nothing to render)
        """
        if not payload:
            return []
        return [cls.from_dict(item) for item in payload if isinstance(item, dict)]

    def add_child(self, content: str) -> "Block":
        """Append a child block and return it."""
        child = Block(content=content)
        self.children.append(child)
        return child
