"""Per-tag emission behaviour.

Each class implements the ``TagHandler`` protocol directly.  Handlers keep
no state of their own: what they need (buffer, context, captured href,
options) comes from the ``ScanState``.  Handlers marked "only when
non-empty" do nothing while the buffer is still empty.

Retraction counts are part of each handler's contract and never exceed
one character per ``truncate`` call.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .html_utils import extract_attribute

if TYPE_CHECKING:
    from .scanner import ScanState


class NonPrintingTag:
    """head, meta, nav, noscript, script, style, template.

    Suppression is driven by the context stack; nothing is emitted here.
    """

    def on_open(self, state: ScanState) -> None:
        pass

    def on_close(self, state: ScanState) -> None:
        pass


class AnchorTag:
    def on_open(self, state: ScanState) -> None:
        buffer = state.buffer
        buffer.rtrim_blank()
        buffer.append_blank()
        buffer.append("[")
        state.href = extract_attribute(state.raw_tag, "href")

    def on_close(self, state: ScanState) -> None:
        if "a" not in state.context:
            return
        buffer = state.buffer
        # retracts 1: separator space before "</a>"
        if buffer.last == " ":
            buffer.truncate(1)
        # retracts 1: the "[" of a link without text
        if buffer.last == "[":
            buffer.truncate(1)
        else:
            buffer.append(f"]({state.href}) ")
        state.href = ""


class BoldTag:
    """b and strong."""

    def on_open(self, state: ScanState) -> None:
        buffer = state.buffer
        if buffer and buffer.last not in " \n":
            buffer.append(" ")
        buffer.append("**")

    def on_close(self, state: ScanState) -> None:
        buffer = state.buffer
        # retracts 1: separator space before "</b>"
        if buffer.last == " ":
            buffer.truncate(1)
        buffer.append("**")


class BreakTag:
    def on_open(self, state: ScanState) -> None:
        pass

    def on_close(self, state: ScanState) -> None:
        if state.buffer:
            state.buffer.hard_break()


class BlockTag:
    """div, ol and ul: start on a fresh paragraph."""

    def on_open(self, state: ScanState) -> None:
        state.buffer.ensure_blank_line()

    def on_close(self, state: ScanState) -> None:
        pass


class SetextHeadingTag:
    """h1 (only when non-empty) and title: underline the line with ``=``."""

    def __init__(self, require_content: bool = True) -> None:
        self.require_content = require_content

    def on_open(self, state: ScanState) -> None:
        pass

    def on_close(self, state: ScanState) -> None:
        if self.require_content and not state.buffer:
            return
        state.buffer.underline("=")


class AtxHeadingTag:
    def __init__(self, marker: str) -> None:
        self.marker = marker

    def on_open(self, state: ScanState) -> None:
        state.buffer.append(f"\n\n\n{self.marker} ")

    def on_close(self, state: ScanState) -> None:
        state.buffer.append("\n\n")


class ListItemTag:
    def on_open(self, state: ScanState) -> None:
        state.buffer.ensure_newline()
        state.buffer.append("* ")

    def on_close(self, state: ScanState) -> None:
        if state.buffer:
            state.buffer.hard_break()


class ParagraphTag:
    def on_open(self, state: ScanState) -> None:
        pass

    def on_close(self, state: ScanState) -> None:
        if state.buffer:
            state.buffer.hard_break()
            state.buffer.append("\n")


class PreformattedTag:
    def on_open(self, state: ScanState) -> None:
        state.buffer.ensure_blank_line()
        state.buffer.append(state.options.code_fence + "\n")

    def on_close(self, state: ScanState) -> None:
        state.buffer.ensure_newline()
        state.buffer.append(state.options.code_fence + "\n\n")


class SpanTag:
    def on_open(self, state: ScanState) -> None:
        pass

    def on_close(self, state: ScanState) -> None:
        if state.in_preformatted:
            return
        if state.content_index > 0 and state.buffer.last != " ":
            state.buffer.append(" ")
