"""Unit tests for clipboard access."""

import pyperclip
import pytest
from unittest.mock import patch

from ripbullets.services.clipboard import SystemClipboard
from ripbullets.services.exceptions import BoundaryError, ClipboardError


@pytest.mark.asyncio
async def test_write_text_copies():
    with patch("pyperclip.copy") as mock_copy:
        await SystemClipboard().write_text("# Markdown")

    mock_copy.assert_called_once_with("# Markdown")


@pytest.mark.asyncio
async def test_missing_clipboard_mechanism():
    error = pyperclip.PyperclipException("could not find a copy/paste mechanism")

    with patch("pyperclip.copy", side_effect=error):
        with pytest.raises(ClipboardError, match="copy/paste mechanism") as exc_info:
            await SystemClipboard().write_text("text")

    assert isinstance(exc_info.value, BoundaryError)
