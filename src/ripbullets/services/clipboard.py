"""System clipboard access."""

import asyncio
from typing import Protocol

import pyperclip

from ripbullets.services.exceptions import ClipboardError
from ripbullets.utils.logging import get_logger


logger = get_logger(__name__)


class Clipboard(Protocol):
    """Destination for the rendered markdown."""

    async def write_text(self, text: str) -> None:
        ...


class SystemClipboard:
    """Clipboard backed by pyperclip (pbcopy, xclip/xsel/wl-copy, or Windows API)."""

    async def write_text(self, text: str) -> None:
        """
        Copy text to the system clipboard.

        pyperclip blocks while the platform tool runs, so the call is moved
        to a worker thread.

        Args:
            text: Text to copy

        Raises:
            ClipboardError: If no clipboard mechanism is available or the copy fails
        """
        try:
            await asyncio.to_thread(pyperclip.copy, text)
        except pyperclip.PyperclipException as e:
            logger.error("clipboard_write_failed", error=str(e))
            raise ClipboardError(str(e)) from e

        logger.info("clipboard_written", chars=len(text))
