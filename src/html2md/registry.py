"""Default tag handler registry builder."""

from __future__ import annotations

from .base import HandlerRegistry
from .handlers import (
    AnchorTag,
    AtxHeadingTag,
    BlockTag,
    BoldTag,
    BreakTag,
    ListItemTag,
    NonPrintingTag,
    ParagraphTag,
    PreformattedTag,
    SetextHeadingTag,
    SpanTag,
)


def build_registry() -> HandlerRegistry:
    """Build the registry for every tag the converter understands."""
    registry = HandlerRegistry()

    registry.register(
        NonPrintingTag(),
        "head", "meta", "nav", "noscript", "script", "style", "template",
    )

    registry.register(AnchorTag(), "a")
    registry.register(BoldTag(), "b", "strong")
    registry.register(BreakTag(), "br", "option")
    registry.register(BlockTag(), "div", "ol", "ul")
    registry.register(SetextHeadingTag(), "h1")
    registry.register(AtxHeadingTag("###"), "h2")
    registry.register(AtxHeadingTag("####"), "h3")
    registry.register(AtxHeadingTag("#####"), "h4")
    registry.register(ListItemTag(), "li")
    registry.register(ParagraphTag(), "p")
    registry.register(PreformattedTag(), "pre")
    registry.register(SpanTag(), "span")
    registry.register(SetextHeadingTag(require_content=False), "title")
    return registry
