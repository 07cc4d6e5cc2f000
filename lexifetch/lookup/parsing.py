"""Extraction of definitions from dictionary entry pages."""

from bs4 import BeautifulSoup

from lexifetch.core.types import Definition
from lexifetch.utils.constants import Constants

# Markers inside a <meaning> block, in order of preference, before which the
# lead paragraph (part of speech, etymology) is split from the sense text.
_SPLIT_MARKERS = ("<sn><b>", "<def>")
_PARAGRAPH_BREAK = "</p><p>"


class PageParseError(ValueError):
    """The page does not look like a dictionary entry."""


def split_lead_paragraph(meaning_html: str) -> str:
    """Insert a paragraph break before the first sense number or definition.

    e.g. '<p>n. <sn><b>1.</b></sn> A run' -> '<p>n. </p><p><sn><b>1.</b></sn> A run'
    """
    for marker in _SPLIT_MARKERS:
        index = meaning_html.find(marker)
        if index != -1:
            return meaning_html[:index] + _PARAGRAPH_BREAK + meaning_html[index:]
    return meaning_html


def is_not_found_page(soup: BeautifulSoup) -> bool:
    status = soup.select_one("h1.http-status")
    return status is not None and status.get_text(strip=True) == Constants.NOT_FOUND_STATUS_TEXT


def parse_definition_page(html: str, term: str) -> Definition | None:
    """Parse an entry page into a Definition.

    Args:
        html: Page body
        term: The term that was requested

    Returns:
        Definition with one block per <meaning> element, or None when the
        page reports a missing entry or has no meanings

    Raises:
        PageParseError: If the page has no headword at all
    """
    soup = BeautifulSoup(html, "html.parser")

    if is_not_found_page(soup):
        return None

    heading = soup.find("h1")
    if heading is None:
        raise PageParseError("page has no headword")

    blocks = tuple(
        split_lead_paragraph(meaning.decode_contents()) for meaning in soup.find_all("meaning")
    )
    if not blocks:
        return None

    return Definition(
        term=term,
        blocks=blocks,
        headword=heading.get_text(strip=True) or None,
    )
