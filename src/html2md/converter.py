"""HTML to Markdown conversion entry points."""

from __future__ import annotations

from .base import HandlerRegistry
from .cleanup import clean_up_markdown
from .config import ConverterOptions
from .html_utils import prepare_html
from .registry import build_registry
from .scanner import Scanner, ScanState


class Converter:
    """Reusable converter bound to one set of options and handlers.

    Every ``convert()`` call scans with a fresh ``ScanState``, so one
    instance may be shared between threads.
    """

    def __init__(
        self,
        options: ConverterOptions | None = None,
        registry: HandlerRegistry | None = None,
    ) -> None:
        self.options = options or ConverterOptions()
        self.registry = registry or build_registry()

    def scan(self, html: str) -> str:
        """Return the raw buffer text, before the cleanup pass."""
        state = ScanState(options=self.options)
        buffer = Scanner(self.registry, state).feed(prepare_html(html))
        return str(buffer)

    def convert(self, html: str) -> str:
        return clean_up_markdown(self.scan(html), self.options.code_fence)


def html_to_markdown(
    html: str,
    options: ConverterOptions | None = None,
    registry: HandlerRegistry | None = None,
) -> str:
    """Convert HTML string to Markdown."""
    return Converter(options, registry).convert(html)
