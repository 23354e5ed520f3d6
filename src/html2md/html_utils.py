"""Raw-HTML helpers: input normalisation and attribute lookup."""

from __future__ import annotations

import re

_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)

# Applied in order; "&amp;" first so "&amp;nbsp;" ends up as a space.
_ENTITIES = (
    ("&amp;", "&"),
    ("&nbsp;", " "),
    ("&rarr;", "→"),
)


def prepare_html(html: str) -> str:
    """Normalise line endings, tabs and a few entities; strip comments."""
    html = html.replace("\r\n", "\n").replace("\t", " ")
    for entity, replacement in _ENTITIES:
        html = html.replace(entity, replacement)
    return _COMMENT_RE.sub("", html)


def extract_attribute(tag: str, name: str) -> str:
    """Return the quoted value of attribute ``name`` in raw tag text.

    ``tag`` is everything between ``<`` and ``>``.  The value must be wrapped
    in single or double quotes; whichever quote follows the ``=`` first is
    the delimiter.  Returns ``""`` when any part is missing.
    """
    offset = tag.find(name)
    if offset == -1:
        return ""
    equals = tag.find("=", offset + len(name))
    if equals == -1:
        return ""

    double = tag.find('"', equals)
    single = tag.find("'", equals)
    if double == -1 and single == -1:
        return ""
    if single == -1 or (double != -1 and double < single):
        quote, opening = '"', double
    else:
        quote, opening = "'", single

    closing = tag.find(quote, opening + 1)
    if closing == -1:
        return ""
    return tag[opening + 1 : closing]
