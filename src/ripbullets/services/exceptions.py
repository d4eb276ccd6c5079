"""Custom exceptions for ripbullets services."""


class RipBulletsError(Exception):
    """Base class for all ripbullets errors."""


class EmptySourceError(RipBulletsError):
    """Raised when the source page has no blocks to transform."""

    def __init__(self, message: str = "No content found on this page"):
        super().__init__(message)


class EmptyResultError(RipBulletsError):
    """Raised when the transform produced nothing worth copying."""

    def __init__(self, message: str = "No content to copy"):
        super().__init__(message)


class BoundaryError(RipBulletsError):
    """Raised when talking to the outside world fails (Logseq, disk, clipboard)."""


class LogseqAPIError(BoundaryError):
    """Raised when a Logseq HTTP API call fails.

    Attributes:
        method: API method that was called (e.g. ``logseq.Editor.getCurrentPageBlocksTree``)
        status_code: HTTP status code, if a response was received
    """

    def __init__(self, method: str, message: str, status_code: int | None = None):
        """Initialize LogseqAPIError.

        Args:
            method: API method that was called
            message: Human-readable error message
            status_code: HTTP status code, if any
        """
        self.method = method
        self.status_code = status_code
        super().__init__(f"{method}: {message}")


class PageNotFoundError(BoundaryError):
    """Raised when a page or journal file does not exist in the graph.

    Attributes:
        path: Path that was looked up
    """

    def __init__(self, path: str, message: str = "Page file not found"):
        self.path = path
        super().__init__(f"{message}: {path}")


class ClipboardError(BoundaryError):
    """Raised when writing to the system clipboard fails."""
