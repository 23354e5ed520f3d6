"""Post-processing of the finished Markdown buffer."""

from __future__ import annotations

from .config import DEFAULT_CODE_FENCE

# Artifacts the single forward pass cannot avoid without lookahead.
# Applied in this order.
SUBSTITUTIONS = (
    (" , ", ", "),
    ("\n.\n", ".\n"),
    ("\n↵\n", " ↵\n"),
    ("\n*\n", "\n"),
    ("\n. ", ".\n"),
    (" [ ", " ["),
    ("\n[ ", "\n["),
)

MAX_BLANK_LINES = 2


def tidy_lines(markdown: str, fence: str = DEFAULT_CODE_FENCE) -> str:
    """Trim every line and allow at most two consecutive blank lines.

    Non-blank lines between two ``fence`` lines are kept verbatim; blank
    lines there are capped like everywhere else.  A content line that
    ended in two or more spaces keeps exactly two (a hard break), unless
    it is a bare ``*`` bullet.  Leading and trailing blank lines are
    dropped and a non-empty result ends with a newline.
    """
    result: list[str] = []
    blank_run = 0
    in_fence = False

    for line in markdown.split("\n"):
        stripped = line.strip()

        if not stripped:
            if blank_run < MAX_BLANK_LINES:
                result.append("")
                blank_run += 1
            continue
        blank_run = 0

        if stripped == fence:
            in_fence = not in_fence
            result.append(stripped)
        elif in_fence:
            result.append(line)
        else:
            if line.endswith("  ") and stripped != "*":
                stripped += "  "
            result.append(stripped)

    while result and not result[0]:
        result.pop(0)
    while result and not result[-1]:
        result.pop()

    return "\n".join(result) + "\n" if result else ""


def apply_substitutions(markdown: str) -> str:
    for needle, replacement in SUBSTITUTIONS:
        markdown = markdown.replace(needle, replacement)
    return markdown


def clean_up_markdown(markdown: str, fence: str = DEFAULT_CODE_FENCE) -> str:
    """Tidy lines, then fix textual artifacts, until nothing changes.

    Iterating to a fixed point makes the function idempotent; each
    round only ever removes characters or moves a newline to the right,
    so it terminates.
    """
    while True:
        cleaned = apply_substitutions(tidy_lines(markdown, fence))
        if cleaned == markdown:
            return cleaned
        markdown = cleaned
