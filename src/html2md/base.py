"""Protocol and registry for per-tag Markdown emission."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .scanner import ScanState


@runtime_checkable
class TagHandler(Protocol):
    """Emission behaviour for one tag kind.

    Handlers are stateless: everything they read or mutate lives on the
    ``ScanState`` passed in, so one instance can serve every occurrence of
    its tag (and several synonym tags).
    """

    def on_open(self, state: ScanState) -> None: ...
    def on_close(self, state: ScanState) -> None: ...


class HandlerRegistry:
    """Mapping of lower-case tag names to handlers.  One handler per name."""

    def __init__(self) -> None:
        self._handlers: dict[str, TagHandler] = {}

    def register(self, handler: TagHandler, *names: str) -> None:
        if not isinstance(handler, TagHandler):
            raise TypeError(
                f"{type(handler).__name__} does not implement on_open/on_close"
            )
        if not names:
            raise ValueError("register() needs at least one tag name")
        for name in names:
            self._handlers[name.lower()] = handler

    def get(self, name: str) -> TagHandler | None:
        return self._handlers.get(name.lower())

    def __contains__(self, name: str) -> bool:
        return name.lower() in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)

    def names(self) -> list[str]:
        return sorted(self._handlers)
