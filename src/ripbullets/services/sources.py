"""Where block trees come from: a running Logseq, or a page file on disk."""

from pathlib import Path
from typing import Optional, Protocol

from ripbullets.logseq.api import LogseqAPIClient
from ripbullets.logseq.parser import parse_outline_file
from ripbullets.models.block import Block
from ripbullets.services.exceptions import BoundaryError, PageNotFoundError
from ripbullets.utils.logging import get_logger


logger = get_logger(__name__)


class BlockSource(Protocol):
    """Anything that can produce a fully materialized block forest."""

    async def fetch(self) -> list[Block]:
        ...


class LogseqAPISource:
    """Fetch a page's block tree from a running Logseq instance.

    Attributes:
        client: Logseq API client
        page: Page name, or None for the page currently open in Logseq
    """

    def __init__(self, client: LogseqAPIClient, page: Optional[str] = None):
        self.client = client
        self.page = page

    async def fetch(self) -> list[Block]:
        if self.page is None:
            blocks = await self.client.get_current_page_blocks_tree()
        else:
            blocks = await self.client.get_page_blocks_tree(self.page)

        logger.info("blocks_fetched", source="logseq_api", page=self.page, count=len(blocks))
        return blocks


class FileSource:
    """Read a page's block tree from a Logseq markdown file.

    Attributes:
        path: Path to the page file
    """

    def __init__(self, path: Path):
        self.path = path

    async def fetch(self) -> list[Block]:
        if not self.path.exists():
            raise PageNotFoundError(str(self.path))

        try:
            blocks = parse_outline_file(self.path)
        except (OSError, UnicodeDecodeError) as e:
            raise BoundaryError(f"Cannot read {self.path}: {e}") from e

        logger.info("blocks_fetched", source="file", path=str(self.path), count=len(blocks))
        return blocks
