"""Shared test fixtures for all test modules."""

import pytest

from ripbullets.models.block import Block


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """
    Point HOME at a temporary directory.

    Keeps log files (~/.cache/ripbullets) and the default config lookup
    (~/.config/ripbullets) away from the real home directory.
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("RIPBULLETS_LOG_FILE", raising=False)
    monkeypatch.setattr(
        "ripbullets.models.config.DEFAULT_CONFIG_PATH",
        home / ".config" / "ripbullets" / "config.yaml",
    )
    return home


@pytest.fixture
def journal_page():
    """A journal page as Logseq's API returns it: properties block first."""
    return [
        Block("type:: journal", [
            Block("Met with [[Alice]] about #project-x"),
        ]),
        Block("Morning notes", [
            Block("Read [[Deep Work]]", [
                Block("Chapter 1 is about focus"),
            ]),
            Block("```python\nprint('hi')\n```"),
        ]),
        Block("Closing thought"),
    ]
