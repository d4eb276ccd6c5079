"""User-facing notifications for the copy action."""

from typing import Iterable, Protocol

from rich.console import Console

from ripbullets.logseq.api import LogseqAPIClient
from ripbullets.services.exceptions import LogseqAPIError
from ripbullets.utils.logging import get_logger


logger = get_logger(__name__)

SUCCESS = "success"
WARNING = "warning"
ERROR = "error"

_STYLES = {
    SUCCESS: ("✓", "green"),
    WARNING: ("!", "yellow"),
    ERROR: ("✗", "bold red"),
}


class Notifier(Protocol):
    """Shows short status messages to the user."""

    async def show_msg(self, message: str, status: str = SUCCESS) -> None:
        ...


class ConsoleNotifier:
    """Print notifications to the terminal (stderr by default)."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console(stderr=True)

    async def show_msg(self, message: str, status: str = SUCCESS) -> None:
        symbol, style = _STYLES.get(status, ("•", ""))
        self.console.print(f"{symbol} {message}", style=style, markup=False, highlight=False, soft_wrap=True)


class LogseqNotifier:
    """Show notifications in Logseq's message bar.

    A failed notification is logged and otherwise ignored, so it never
    hides the outcome it was reporting.
    """

    def __init__(self, client: LogseqAPIClient):
        self.client = client

    async def show_msg(self, message: str, status: str = SUCCESS) -> None:
        try:
            await self.client.show_msg(message, status)
        except LogseqAPIError as e:
            logger.warning("logseq_notify_failed", message=message, error=str(e))


class MultiNotifier:
    """Send every notification to several notifiers in order."""

    def __init__(self, notifiers: Iterable[Notifier]):
        self.notifiers = list(notifiers)

    async def show_msg(self, message: str, status: str = SUCCESS) -> None:
        for notifier in self.notifiers:
            await notifier.show_msg(message, status)
