"""Unit tests for notifiers."""

import io

import pytest
from rich.console import Console
from unittest.mock import AsyncMock, Mock

from ripbullets.services.exceptions import LogseqAPIError
from ripbullets.services.notifications import (
    ERROR,
    SUCCESS,
    WARNING,
    ConsoleNotifier,
    LogseqNotifier,
    MultiNotifier,
)


def make_console():
    buffer = io.StringIO()
    return Console(file=buffer, force_terminal=False, color_system=None), buffer


class TestConsoleNotifier:
    """Tests for ConsoleNotifier."""

    @pytest.mark.asyncio
    async def test_success(self):
        console, buffer = make_console()
        await ConsoleNotifier(console).show_msg("Copied!", SUCCESS)
        assert buffer.getvalue() == "✓ Copied!\n"

    @pytest.mark.asyncio
    async def test_warning(self):
        console, buffer = make_console()
        await ConsoleNotifier(console).show_msg("No content to copy", WARNING)
        assert buffer.getvalue() == "! No content to copy\n"

    @pytest.mark.asyncio
    async def test_error_keeps_brackets(self):
        """Messages are printed literally, not as rich markup."""
        console, buffer = make_console()
        await ConsoleNotifier(console).show_msg("Failed to copy: [red] oops", ERROR)
        assert buffer.getvalue() == "✗ Failed to copy: [red] oops\n"


class TestLogseqNotifier:
    """Tests for LogseqNotifier."""

    @pytest.mark.asyncio
    async def test_forwards_to_logseq(self):
        client = Mock()
        client.show_msg = AsyncMock()

        await LogseqNotifier(client).show_msg("Copied!", SUCCESS)

        client.show_msg.assert_awaited_once_with("Copied!", SUCCESS)

    @pytest.mark.asyncio
    async def test_api_failure_is_not_raised(self):
        client = Mock()
        client.show_msg = AsyncMock(side_effect=LogseqAPIError("logseq.UI.showMsg", "down"))

        await LogseqNotifier(client).show_msg("Copied!", SUCCESS)

        client.show_msg.assert_awaited_once()


@pytest.mark.asyncio
async def test_multi_notifier_fans_out_in_order():
    calls = []

    class Recorder:
        def __init__(self, name):
            self.name = name

        async def show_msg(self, message, status=SUCCESS):
            calls.append((self.name, message, status))

    await MultiNotifier([Recorder("a"), Recorder("b")]).show_msg("hi", WARNING)

    assert calls == [("a", "hi", WARNING), ("b", "hi", WARNING)]
