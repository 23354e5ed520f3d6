"""Tests for the Markdown cleanup pass."""

import pytest

from html2md.cleanup import apply_substitutions, clean_up_markdown, tidy_lines


class TestTidyLines:
    def test_trims_lines(self):
        assert tidy_lines("  a  b \n c") == "a  b\nc\n"

    def test_collapses_blank_runs_to_two(self):
        assert tidy_lines("a\n\n\n\n\n\nb") == "a\n\n\nb\n"

    def test_whitespace_only_lines_are_blank(self):
        assert tidy_lines("a\n   \n \t \n  \n  \nb") == "a\n\n\nb\n"

    def test_drops_leading_and_trailing_blank_lines(self):
        assert tidy_lines("\n\n\na\n\n\n") == "a\n"

    def test_empty(self):
        assert tidy_lines("") == ""
        assert tidy_lines(" \n \n") == ""

    def test_keeps_hard_break(self):
        assert tidy_lines("a   \nb  \nc ") == "a  \nb  \nc\n"

    def test_bare_bullet_has_no_hard_break(self):
        assert tidy_lines("x\n*  \ny") == "x\n*\ny\n"

    def test_fenced_block_kept_verbatim(self):
        md = "text \n````\n  indented  \n  more\nend\n````\n after"
        assert tidy_lines(md) == "text\n````\n  indented  \n  more\nend\n````\nafter\n"

    def test_fenced_block_blank_lines_still_capped(self):
        md = "````\na\n\n\n\n\nb\n````"
        assert tidy_lines(md) == "````\na\n\n\nb\n````\n"

    def test_only_configured_fence_opens_block(self):
        md = "````\n```\n  x\n````"
        assert tidy_lines(md) == "````\n```\n  x\n````\n"
        assert tidy_lines(md, fence="```") == "````\n```\n  x\n````\n"

    def test_literal_backticks_are_plain_text(self):
        md = "```  \n\n\n\n\n### x \n\n  y  "
        assert tidy_lines(md) == "```  \n\n\n### x\n\ny  \n"


class TestSubstitutions:
    @pytest.mark.parametrize(
        ("markdown", "expected"),
        [
            ("a , b", "a, b"),
            ("a\n.\nb", "a.\nb"),
            ("a\n↵\nb", "a ↵\nb"),
            ("a\n*\nb", "a\nb"),
            ("a\n. b", "a.\nb"),
            ("x [ y", "x [y"),
            ("x\n[ y", "x\n[y"),
        ],
    )
    def test_each_substitution(self, markdown, expected):
        assert apply_substitutions(markdown) == expected


class TestCleanUpMarkdown:
    def test_full_pass(self):
        assert clean_up_markdown("  Hello , world \n\n\n\n\n. Next") == "Hello, world.\nNext\n"

    @pytest.mark.parametrize(
        "markdown",
        [
            "",
            "plain",
            " , , , ",
            "a\n. . . x",
            "\n\n\n\nx   \n\n\n\n\ny\n\n",
            "````\n  code  \n````",
            "* a  \n*\n* b  \n",
            "a\n.\n.\n.\nb",
            "\n[ \n[ x",
            "x  \n\n\n\n\n   \n. y , z",
        ],
    )
    def test_idempotent(self, markdown):
        once = clean_up_markdown(markdown)
        assert clean_up_markdown(once) == once

    @pytest.mark.parametrize(
        "markdown",
        ["a\n\n\n\n\n\nb", "\n \n \n \n \nx\n \n \n \n", "a\n\n\n\n\n.\n\n\n\n\nb"],
    )
    def test_never_three_blank_lines(self, markdown):
        assert "\n\n\n\n" not in clean_up_markdown(markdown)
