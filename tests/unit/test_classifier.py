"""Unit tests for block content classification."""

import pytest

from ripbullets.markdown.classifier import (
    BlockKind,
    classify_content,
    contains_table,
    is_code_fence,
    is_preformatted_content,
    is_property_line,
)


class TestIsCodeFence:
    """Test code fence detection."""

    def test_opening_fence(self):
        assert is_code_fence("```python\nprint(1)\n```")

    def test_leading_whitespace_ignored(self):
        assert is_code_fence("  \n```\ncode\n```")

    def test_unclosed_fence_still_counts(self):
        """Detection only looks at the opening marker."""
        assert is_code_fence("```\nno closing fence")

    def test_inline_code_is_not_a_fence(self):
        assert not is_code_fence("Use `x` here")

    def test_fence_later_in_text(self):
        assert not is_code_fence("Intro\n```\ncode\n```")


class TestIsPropertyLine:
    """Test property line detection."""

    @pytest.mark.parametrize("content", [
        "type:: journal",
        "tags:: a, b",
        "created-at:: 2025-01-15",
        "my_key::",
        "  title:: Padded  ",
        "title:: Page\ntype:: project",
    ])
    def test_property_lines(self, content):
        assert is_property_line(content)

    @pytest.mark.parametrize("content", [
        "1st:: no leading letter",
        "_private:: underscore first",
        "key: single colon",
        "some text with key:: inside",
        "key :: space before colons",
        "",
    ])
    def test_not_property_lines(self, content):
        assert not is_property_line(content)


class TestIsPreformattedContent:
    """Test preformatted content detection."""

    def test_code_fence(self):
        assert is_preformatted_content("```\ncode\n```")

    def test_table_row(self):
        assert is_preformatted_content("| a | b |")

    def test_horizontal_rule(self):
        assert is_preformatted_content("---")

    def test_horizontal_rule_with_surrounding_whitespace(self):
        assert is_preformatted_content("  ---\n")

    def test_longer_rule_is_not_exact(self):
        assert not is_preformatted_content("----")

    def test_plain_text(self):
        assert not is_preformatted_content("Just some text")

    def test_pipe_inside_text(self):
        assert not is_preformatted_content("a | b")


class TestContainsTable:
    """Test multi-line table detection."""

    def test_two_table_rows(self):
        assert contains_table("| a | b |\n| c | d |")

    def test_table_after_heading_line(self):
        """A table below ordinary text is still a table."""
        assert contains_table("Results:\n| a | b |\n|---|---|\n| 1 | 2 |")

    def test_indented_rows(self):
        assert contains_table("  | a |\n  | b |")

    def test_single_row_is_not_enough(self):
        assert not contains_table("Intro\n| a | b |")

    def test_pipes_not_at_line_start(self):
        assert not contains_table("a | b\nc | d")


class TestClassifyContent:
    """Test classification priority."""

    def test_property_first(self):
        assert classify_content("type:: journal") is BlockKind.PROPERTY

    def test_property_disabled(self):
        assert classify_content("type:: journal", allow_property=False) is BlockKind.PLAIN

    def test_property_with_table_falls_through_when_disabled(self):
        content = "caption:: x\n| a |\n| b |"
        assert classify_content(content, allow_property=False) is BlockKind.PREFORMATTED

    def test_code_fence_beats_preformatted(self):
        """Fences also satisfy the preformatted check but stay fences."""
        assert classify_content("```\n| a |\n| b |\n```") is BlockKind.CODE_FENCE

    def test_table_row(self):
        assert classify_content("| a | b |") is BlockKind.PREFORMATTED

    def test_multi_line_table(self):
        assert classify_content("Data\n| a |\n| b |") is BlockKind.PREFORMATTED

    def test_horizontal_rule(self):
        assert classify_content("---") is BlockKind.PREFORMATTED

    def test_plain(self):
        assert classify_content("Hello [[World]]") is BlockKind.PLAIN
