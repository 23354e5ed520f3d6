"""Append-only Markdown text accumulator with bounded retraction."""

from __future__ import annotations

_BLANK = " \t"


class MarkdownBuffer:
    """Growable Markdown output.

    Tracks the length of the line currently being written (reset by every
    appended newline) so the scanner can soft-wrap and headings can be
    underlined.  The only way to remove text is ``truncate()``, which
    drops at most two characters.
    """

    __slots__ = ("_chars", "line_length")

    def __init__(self) -> None:
        self._chars: list[str] = []
        self.line_length = 0

    def __len__(self) -> int:
        return len(self._chars)

    def __bool__(self) -> bool:
        return bool(self._chars)

    def __str__(self) -> str:
        return "".join(self._chars)

    @property
    def last(self) -> str:
        """Last emitted character, or ``""`` when empty."""
        return self._chars[-1] if self._chars else ""

    @property
    def second_last(self) -> str:
        return self._chars[-2] if len(self._chars) > 1 else ""

    def ends_with(self, suffix: str) -> bool:
        n = len(suffix)
        return n <= len(self._chars) and "".join(self._chars[-n:]) == suffix

    def append(self, text: str) -> None:
        for ch in text:
            self._chars.append(ch)
            if ch == "\n":
                self.line_length = 0
            else:
                self.line_length += 1

    def truncate(self, count: int = 1) -> None:
        """Retract the last ``count`` characters (1 or 2)."""
        if count not in (1, 2):
            raise ValueError(f"truncate() retracts 1 or 2 characters, not {count}")
        if not self._chars:
            return
        del self._chars[-count:]
        self._recount_line()

    def rtrim_blank(self) -> None:
        """Drop trailing spaces and tabs, never newlines."""
        while self._chars and self._chars[-1] in _BLANK:
            self.truncate(1)

    def append_blank(self) -> None:
        """Append one space unless at line start or right after ``**``."""
        if not self._chars or self.last in " \n" or (self.last == "*" and self.second_last == "*"):
            return
        self.append(" ")

    def ensure_newline(self) -> None:
        if self._chars and self.last != "\n":
            self.append("\n")

    def ensure_blank_line(self) -> None:
        """Make the buffer end with an empty line, adding at most two newlines."""
        if not self._chars:
            return
        for _ in range(2):
            if self.ends_with("\n\n"):
                break
            self.append("\n")

    def hard_break(self) -> None:
        """Emit two trailing spaces and a newline, absorbing a separator space."""
        if self.last == " ":
            self.truncate(1)
        self.append("  \n")

    def underline(self, char: str = "=") -> None:
        """Turn the current line into a setext heading."""
        if self.last == " ":
            self.truncate(1)
        width = self.line_length
        self.append("\n" + char * width + "\n\n")

    def _recount_line(self) -> None:
        count = 0
        for ch in reversed(self._chars):
            if ch == "\n":
                break
            count += 1
        self.line_length = count
