"""Logseq graph path operations.

This module locates page and journal files inside a Logseq graph directory.
"""

from datetime import date
from pathlib import Path

from ripbullets.services.exceptions import PageNotFoundError


# Logseq's default :file/name-format :triple-lowbar encodes "/" as "___"
NAMESPACE_SEPARATOR = "___"


class GraphPaths:
    """Utility class for Logseq graph path operations.

    Attributes:
        graph_path: Root path to Logseq graph directory
    """

    def __init__(self, graph_path: Path):
        """Initialize with graph root path.

        Args:
            graph_path: Path to Logseq graph directory

        Raises:
            ValueError: If graph_path doesn't exist or isn't a directory
        """
        if not graph_path.exists():
            raise ValueError(f"Graph path does not exist: {graph_path}")
        if not graph_path.is_dir():
            raise ValueError(f"Graph path is not a directory: {graph_path}")

        self.graph_path = graph_path

    @property
    def journals_dir(self) -> Path:
        """Path to journals/ directory."""
        return self.graph_path / "journals"

    @property
    def pages_dir(self) -> Path:
        """Path to pages/ directory."""
        return self.graph_path / "pages"

    def get_journal_path(self, journal_date: date) -> Path:
        """Get path to a journal file.

        Args:
            journal_date: Journal date

        Returns:
            Path to journal file (e.g., journals/2025_01_15.md)
        """
        return self.journals_dir / f"{journal_date.strftime('%Y_%m_%d')}.md"

    def get_page_path(self, page_name: str) -> Path:
        """Get path to a page file.

        Args:
            page_name: Page name (e.g., "Project X" or "Projects/Alpha")

        Returns:
            Path to page file (e.g., pages/Projects___Alpha.md)
        """
        file_name = page_name.replace("/", NAMESPACE_SEPARATOR)
        return self.pages_dir / f"{file_name}.md"

    def find_page(self, page_name: str) -> Path:
        """Find an existing page file, ignoring case.

        Logseq page names are case-insensitive, while file names keep the
        case the page was created with.

        Args:
            page_name: Page name

        Returns:
            Path to the existing page file

        Raises:
            PageNotFoundError: If no page file matches
        """
        exact = self.get_page_path(page_name)
        if exact.exists():
            return exact

        wanted = exact.name.lower()
        for candidate in self.list_pages():
            if candidate.name.lower() == wanted:
                return candidate

        raise PageNotFoundError(str(exact))

    def find_journal(self, journal_date: date) -> Path:
        """Find an existing journal file.

        Raises:
            PageNotFoundError: If no journal exists for the date
        """
        path = self.get_journal_path(journal_date)
        if not path.exists():
            raise PageNotFoundError(str(path), "Journal file not found")
        return path

    def list_pages(self) -> list[Path]:
        """List all page files in alphabetical order."""
        if not self.pages_dir.exists():
            return []

        return sorted(self.pages_dir.glob("*.md"))
