"""Unit tests for block sources."""

import pytest
from unittest.mock import AsyncMock, Mock

from ripbullets.models.block import Block
from ripbullets.services.exceptions import BoundaryError, PageNotFoundError
from ripbullets.services.sources import FileSource, LogseqAPISource


class TestLogseqAPISource:
    """Tests for LogseqAPISource."""

    @pytest.mark.asyncio
    async def test_current_page(self):
        client = Mock()
        client.get_current_page_blocks_tree = AsyncMock(return_value=[Block("A")])

        blocks = await LogseqAPISource(client).fetch()

        assert blocks == [Block("A")]
        client.get_current_page_blocks_tree.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_named_page(self):
        client = Mock()
        client.get_page_blocks_tree = AsyncMock(return_value=[Block("B")])

        blocks = await LogseqAPISource(client, page="Project X").fetch()

        assert blocks == [Block("B")]
        client.get_page_blocks_tree.assert_awaited_once_with("Project X")


class TestFileSource:
    """Tests for FileSource."""

    @pytest.mark.asyncio
    async def test_reads_and_parses(self, tmp_path):
        page = tmp_path / "page.md"
        page.write_text("- Parent\n  - Child\n", encoding="utf-8")

        blocks = await FileSource(page).fetch()

        assert blocks == [Block("Parent", [Block("Child")])]

    @pytest.mark.asyncio
    async def test_missing_file(self, tmp_path):
        with pytest.raises(PageNotFoundError):
            await FileSource(tmp_path / "missing.md").fetch()

    @pytest.mark.asyncio
    async def test_undecodable_file(self, tmp_path):
        page = tmp_path / "binary.md"
        page.write_bytes(b"\xff\xfe\x00bad")

        with pytest.raises(BoundaryError, match="Cannot read"):
            await FileSource(page).fetch()
