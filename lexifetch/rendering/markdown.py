"""Markdown rendering of dictionary entries as Obsidian callouts."""

import re
from collections.abc import Sequence

from bs4 import BeautifulSoup, Comment, Doctype, NavigableString, Tag

_BOLD_TAGS = frozenset({"b", "strong"})
_ITALIC_TAGS = frozenset({"i", "em"})
_BLOCK_TAGS = frozenset({"p", "div", "blockquote", "section", "ul", "ol", "li", "table", "tr"})
_SKIPPED_TAGS = frozenset({"script", "style"})

_WHITESPACE = re.compile(r"\s+")
_EXCESS_BLANK_LINES = re.compile(r"\n{3,}")


def _wrap(marker: str, text: str) -> str:
    """Wrap ``text`` in an inline marker, keeping surrounding spaces outside it."""
    stripped = text.strip()
    if not stripped:
        return text
    leading = " " if text[:1].isspace() else ""
    trailing = " " if text[-1:].isspace() else ""
    return f"{leading}{marker}{stripped}{marker}{trailing}"


def _convert(node) -> str:
    if isinstance(node, (Comment, Doctype)):
        return ""
    if isinstance(node, NavigableString):
        return _WHITESPACE.sub(" ", str(node))
    if not isinstance(node, Tag):
        return ""

    name = node.name
    if name in _SKIPPED_TAGS:
        return ""
    if name == "br":
        return "\n"

    inner = "".join(_convert(child) for child in node.children)

    if name in _BOLD_TAGS:
        return _wrap("**", inner)
    if name in _ITALIC_TAGS:
        return _wrap("*", inner)
    if name in _BLOCK_TAGS:
        return f"\n\n{inner.strip()}\n\n"
    # Dictionary-specific tags (<sn>, <def>, <ety>, ...) carry no formatting
    return inner


def html_to_markdown(html: str) -> str:
    """Convert a fragment of entry HTML to Markdown.

    Paragraphs become blank-line separated, bold and italic are kept, and any
    other markup is unwrapped to its text.
    """
    soup = BeautifulSoup(html, "html.parser")
    raw = _convert(soup)

    lines = [" ".join(line.split()) for line in raw.split("\n")]
    text = "\n".join(lines)
    return _EXCESS_BLANK_LINES.sub("\n\n", text).strip()


def render_callout(term: str, block_html: str) -> str:
    """Render one sense as a collapsed Obsidian note callout titled with ``term``."""
    markdown = html_to_markdown(block_html)
    quoted = "\n".join(f"> {line}" for line in markdown.split("\n"))
    return f">[!note]- {term}\n{quoted}\n\n"


def render_markdown(term: str, blocks: Sequence[str]) -> str:
    """Render every content block of an entry, in order."""
    return "".join(render_callout(term, block) for block in blocks)
