"""Ancestor stack of currently open tags."""

from __future__ import annotations

from collections.abc import Iterable

IGNORED_TAGS = frozenset({"script", "style", "template", "noscript", "nav"})

# Content below these is shown even when an ignored tag is nested inside.
PASSTHROUGH_TAGS = frozenset({"pre", "title"})


class ContextStack:
    """Open-tag ancestry at the current scan position.

    Pushed on every recognised opening tag and popped on its closing tag.
    Popping an empty stack is a no-op so unbalanced markup is tolerated.
    """

    __slots__ = ("_ignored", "_tags")

    def __init__(self, ignored: Iterable[str] = IGNORED_TAGS) -> None:
        self._tags: list[str] = []
        self._ignored = frozenset(ignored)

    def __len__(self) -> int:
        return len(self._tags)

    def __contains__(self, name: str) -> bool:
        return name in self._tags

    def __repr__(self) -> str:
        return f"ContextStack({self._tags!r})"

    def push(self, name: str) -> None:
        self._tags.append(name)

    def pop(self, name: str) -> str | None:
        """Close ``name`` and anything opened after it.

        Closing a tag that is not open leaves the stack untouched.
        """
        for index in range(len(self._tags) - 1, -1, -1):
            if self._tags[index] == name:
                del self._tags[index:]
                return name
        return None

    def in_ignored_region(self) -> bool:
        """True when an ignored tag is open and no pre/title encloses it."""
        for name in self._tags:
            if name in PASSTHROUGH_TAGS:
                return False
            if name in self._ignored:
                return True
        return False
