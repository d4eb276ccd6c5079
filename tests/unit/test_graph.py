"""Unit tests for graph path operations."""

from datetime import date

import pytest

from ripbullets.logseq.graph import GraphPaths
from ripbullets.services.exceptions import PageNotFoundError


@pytest.fixture
def graph(tmp_path):
    graph_dir = tmp_path / "graph"
    (graph_dir / "journals").mkdir(parents=True)
    (graph_dir / "pages").mkdir()
    return GraphPaths(graph_dir)


class TestGraphPaths:
    """Tests for GraphPaths."""

    def test_missing_directory(self, tmp_path):
        with pytest.raises(ValueError, match="does not exist"):
            GraphPaths(tmp_path / "nope")

    def test_file_instead_of_directory(self, tmp_path):
        file_path = tmp_path / "file.md"
        file_path.write_text("x")
        with pytest.raises(ValueError, match="not a directory"):
            GraphPaths(file_path)

    def test_journal_path(self, graph):
        path = graph.get_journal_path(date(2025, 1, 15))
        assert path == graph.graph_path / "journals" / "2025_01_15.md"

    def test_page_path(self, graph):
        assert graph.get_page_path("Project X").name == "Project X.md"

    def test_namespaced_page_path(self, graph):
        assert graph.get_page_path("Projects/Alpha").name == "Projects___Alpha.md"

    def test_find_page_exact(self, graph):
        page = graph.pages_dir / "Project X.md"
        page.write_text("- x")
        assert graph.find_page("Project X") == page

    def test_find_page_ignores_case(self, graph):
        page = graph.pages_dir / "Project X.md"
        page.write_text("- x")
        assert graph.find_page("project x") == page

    def test_find_page_missing(self, graph):
        with pytest.raises(PageNotFoundError, match="Page file not found"):
            graph.find_page("Missing")

    def test_find_journal(self, graph):
        journal = graph.journals_dir / "2025_01_15.md"
        journal.write_text("- entry")
        assert graph.find_journal(date(2025, 1, 15)) == journal

    def test_find_journal_missing(self, graph):
        with pytest.raises(PageNotFoundError, match="Journal file not found"):
            graph.find_journal(date(2025, 1, 16))

    def test_list_pages_sorted(self, graph):
        for name in ("b.md", "a.md", "notes.txt"):
            (graph.pages_dir / name).write_text("- x")
        assert [p.name for p in graph.list_pages()] == ["a.md", "b.md"]
