"""html2md — streaming HTML to Markdown conversion."""

from __future__ import annotations

from .base import HandlerRegistry, TagHandler
from .config import ConverterOptions
from .converter import Converter, html_to_markdown
from .hooks import HookResult, PostConversionHook
from .registry import build_registry

__all__ = [
    "Converter",
    "ConverterOptions",
    "HandlerRegistry",
    "HookResult",
    "PostConversionHook",
    "TagHandler",
    "build_registry",
    "html_to_markdown",
]
