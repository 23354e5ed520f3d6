"""Tests for the open-tag context stack."""

from html2md.context import ContextStack


def _stack(*names: str) -> ContextStack:
    stack = ContextStack()
    for name in names:
        stack.push(name)
    return stack


class TestPushPop:
    def test_pop_empty_is_noop(self):
        stack = ContextStack()
        assert stack.pop("p") is None
        assert len(stack) == 0

    def test_pop_innermost(self):
        stack = _stack("div", "p")
        assert stack.pop("p") == "p"
        assert "p" not in stack
        assert "div" in stack

    def test_pop_by_name_unwinds_unclosed_children(self):
        stack = _stack("div", "p", "b")
        assert stack.pop("div") == "div"
        assert len(stack) == 0

    def test_pop_unknown_name_leaves_stack(self):
        stack = _stack("div", "p")
        assert stack.pop("ul") is None
        assert len(stack) == 2

    def test_membership(self):
        stack = _stack("div", "a")
        assert "a" in stack
        assert "pre" not in stack


class TestIgnoredRegion:
    def test_plain_content(self):
        assert not _stack("div", "p").in_ignored_region()

    def test_script_anywhere_in_ancestry(self):
        assert _stack("script").in_ignored_region()
        assert _stack("div", "noscript", "p").in_ignored_region()

    def test_pre_or_title_before_ignored_tag_exempts(self):
        assert not _stack("pre", "script").in_ignored_region()
        assert not _stack("title", "style").in_ignored_region()

    def test_ignored_tag_before_pre_still_ignored(self):
        assert _stack("nav", "pre").in_ignored_region()

    def test_head_is_not_ignored(self):
        assert not _stack("head", "title").in_ignored_region()

    def test_custom_ignored_set(self):
        stack = ContextStack(ignored={"aside"})
        stack.push("script")
        assert not stack.in_ignored_region()
        stack.push("aside")
        assert stack.in_ignored_region()
