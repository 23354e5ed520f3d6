"""Single forward pass over preprocessed HTML, emitting Markdown.

The scanner alternates between two regions: tag markup (``<...>``) and
content.  Tag markup is collected into a transient descriptor and handed
to the registered handler when ``>`` is reached; content characters are
appended to the buffer after whitespace collapsing and soft wrapping.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .base import HandlerRegistry
from .buffer import MarkdownBuffer
from .config import ConverterOptions
from .context import ContextStack
from .handlers import NonPrintingTag

VOID_TAGS = frozenset({"br", "hr", "img", "input", "link", "meta", "wbr"})

# stands in for configured ignored tags the registry has no handler for
_NON_PRINTING = NonPrintingTag()


@dataclass
class ScanState:
    """Everything that changes while one document is scanned."""

    options: ConverterOptions = field(default_factory=ConverterOptions)
    buffer: MarkdownBuffer = field(default_factory=MarkdownBuffer)
    context: ContextStack | None = None

    # tag markup
    in_tag: bool = False
    is_closing: bool = False
    quote: str = ""
    after_equals: bool = False
    tag_chars: list[str] = field(default_factory=list)
    tag_text: list[str] = field(default_factory=list)

    # name of the most recently scanned tag, opening or closing
    tag_name: str = ""
    # characters emitted since the most recent tag
    content_index: int = 0
    href: str = ""

    def __post_init__(self) -> None:
        if self.context is None:
            self.context = ContextStack(self.options.ignored_tags)

    @property
    def raw_tag(self) -> str:
        return "".join(self.tag_text)

    @property
    def in_preformatted(self) -> bool:
        return "pre" in self.context

    @property
    def suppressed(self) -> bool:
        return self.context.in_ignored_region()


class Scanner:
    """Drive a ``ScanState`` through one HTML document."""

    def __init__(self, registry: HandlerRegistry, state: ScanState | None = None) -> None:
        self.registry = registry
        self.state = state or ScanState()

    def feed(self, html: str) -> MarkdownBuffer:
        state = self.state
        for ch in html:
            if state.in_tag:
                self._scan_tag_char(ch)
            elif ch == "<":
                self._enter_tag()
            else:
                self._scan_content_char(ch)
        return state.buffer

    # -- tag markup -------------------------------------------------------

    def _enter_tag(self) -> None:
        state = self.state
        state.in_tag = True
        state.is_closing = False
        state.quote = ""
        state.after_equals = False
        state.tag_chars.clear()
        state.tag_text.clear()

        buffer = state.buffer
        if buffer and buffer.last not in " \n" and not state.suppressed and not state.in_preformatted:
            buffer.append(" ")

    def _scan_tag_char(self, ch: str) -> None:
        state = self.state

        if state.quote:
            state.tag_text.append(ch)
            if ch == state.quote:
                state.quote = ""
            return

        if ch == ">":
            self._leave_tag()
            return
        if ch == "<":
            # stray "<" (e.g. a comparison in a script); restart at this one
            self._enter_tag()
            return

        state.tag_text.append(ch)

        if ch == "/" and not state.tag_chars:
            state.is_closing = True
            return
        if ch == "=":
            state.after_equals = True
            return
        if ch in "\"'" and state.after_equals:
            state.quote = ch
            state.after_equals = False
            return
        if not ch.isspace():
            state.after_equals = False
        state.tag_chars.append(ch)

    def _leave_tag(self) -> None:
        state = self.state
        state.in_tag = False

        parts = "".join(state.tag_chars).split(None, 1)
        name = parts[0].lower() if parts else ""
        self_closing = _is_self_closing(state.raw_tag)
        if self_closing:
            name = name.rstrip("/")
        state.tag_name = name

        handler = self.registry.get(name) if name else None
        if handler is None and name in state.options.ignored_tags:
            handler = _NON_PRINTING
        if handler is not None:
            if state.is_closing:
                self._dispatch(handler.on_close)
                state.context.pop(name)
            else:
                state.context.push(name)
                self._dispatch(handler.on_open)
                if self_closing or name in VOID_TAGS:
                    self._dispatch(handler.on_close)
                    state.context.pop(name)

        state.content_index = 0

    def _dispatch(self, callback) -> None:
        if not self.state.suppressed:
            callback(self.state)

    # -- content ----------------------------------------------------------

    def _scan_content_char(self, ch: str) -> None:
        state = self.state
        if state.suppressed or state.tag_name == "link":
            return

        buffer = state.buffer

        if state.in_preformatted:
            # browsers drop a newline directly after <pre>
            if ch == "\n" and state.content_index == 0 and state.tag_name == "pre":
                return
            buffer.append(ch)
            state.content_index += 1
            return

        if ch in "\n\r":
            ch = " "
        if ch == " " and (not buffer or buffer.last in " \n"):
            return
        # leading whitespace inside an inline element, e.g. "<b> x</b>"
        if ch == " " and state.content_index == 0 and not state.is_closing:
            return
        if ch == "." and buffer.last == " ":
            buffer.truncate(1)

        buffer.append(ch)
        state.content_index += 1

        wrap_width = state.options.wrap_width
        if ch == " " and wrap_width and buffer.line_length > wrap_width:
            buffer.truncate(1)
            buffer.append("\n")


def _is_self_closing(raw: str) -> bool:
    """True for ``<br/>`` style markup.

    A trailing ``/`` that ends an unquoted attribute value, as in
    ``<a href=/>``, belongs to the value.
    """
    raw = raw.rstrip()
    if not raw.endswith("/"):
        return False
    body = raw[:-1]
    if not body or body[-1].isspace():
        return True
    last = body.split()[-1]
    return "=" not in last or last[-1] in "\"'"
