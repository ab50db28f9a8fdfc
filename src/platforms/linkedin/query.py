"""Selector-fallback queries over parsed LinkedIn markup.

Every lookup walks an ordered selector chain and stops at the first
non-empty result. Only the first element matched by each selector is
considered; when it is empty the chain moves on to the next selector.
"""

import logging
from typing import NamedTuple

from bs4 import BeautifulSoup, Tag

logger = logging.getLogger(__name__)


class Query(NamedTuple):
    """A CSS selector plus which match to take (0 = first)."""

    css: str
    nth: int = 0


Selector = str | Query


def load(html: str) -> BeautifulSoup:
    """Parse raw HTML with the stdlib-backed parser (no lxml needed)."""
    return BeautifulSoup(html, "html.parser")


def select_nth(node: Tag, selector: Selector) -> Tag | None:
    """Return the element a single selector points at, or None.

    A selector the CSS engine rejects is logged and treated as no match.
    """
    query = selector if isinstance(selector, Query) else Query(selector)
    try:
        if query.nth == 0:
            return node.select_one(query.css)
        matches = node.select(query.css, limit=query.nth + 1)
    except Exception:
        logger.debug("Selector '%s' raised, trying next", query.css, exc_info=True)
        return None
    return matches[query.nth] if len(matches) > query.nth else None


def find_first(node: Tag, selectors: tuple[Selector, ...]) -> Tag | None:
    """Return the first element matching any selector in order."""
    for selector in selectors:
        el = select_nth(node, selector)
        if el is not None:
            return el
    return None


def node_text(el: Tag | None, separator: str = "") -> str:
    """Trimmed text content of an element ("" for None).

    With a separator, each text fragment is stripped and joined with it.
    """
    if el is None:
        return ""
    if separator:
        return el.get_text(separator, strip=True)
    return el.get_text().strip()


def first_non_empty_text(
    node: Tag, selectors: tuple[Selector, ...], separator: str = "",
) -> str:
    """Try selectors in order, return the first non-empty trimmed text or ""."""
    for selector in selectors:
        text = node_text(select_nth(node, selector), separator)
        if text:
            return text
    return ""


def first_attr(node: Tag, selectors: tuple[Selector, ...], attr: str) -> str | None:
    """Try selectors in order, return the first non-empty attribute value or None."""
    for selector in selectors:
        el = select_nth(node, selector)
        if el is None:
            continue
        value = el.get(attr)
        if isinstance(value, list):
            value = " ".join(value)
        if value and value.strip():
            return value.strip()
    return None
