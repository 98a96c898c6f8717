"""
General HTML head metadata.

Collects the fields every page may carry regardless of dialect: title,
description, author, canonical and related links, robots directives,
document language and direction, and icon links.
"""

from typing import Any

from html_metadata.core.exceptions import NotFoundError
from html_metadata.extraction.document import Document, Element, require_document

# (result key, selector, attribute); the first matching element wins
_SINGLE_FIELDS = (
    ("author", "meta[name=author]", "content"),
    ("authorlink", "link[rel=author]", "href"),
    ("canonical", "link[rel=canonical]", "href"),
    ("description", "meta[name=description]", "content"),
    ("publisher", "link[rel=publisher]", "href"),
    ("robots", "meta[name=robots]", "content"),
    ("shortlink", "link[rel=shortlink]", "href"),
)

_ICON_FIELDS = ("href", "sizes", "type")


def _first_attr(document: Document, selector: str, attribute: str) -> str | None:
    element = document.first(selector)
    return element.attr(attribute) if element is not None else None


def _icon(element: Element) -> dict[str, str]:
    """{href, sizes, type} with undefined sub-fields left out."""
    icon = {}
    for name in _ICON_FIELDS:
        value = element.attr(name)
        if value:
            icon[name] = value
    return icon


def _icons(document: Document, selector: str) -> list[dict[str, str]]:
    return [icon for icon in map(_icon, document.query(selector)) if icon]


def parse_general(document: Document) -> dict[str, Any]:
    """
    Scrape general metadata terms.

    Returns:
        Mapping with any of author, authorlink, canonical, description,
        publisher, robots, shortlink, title, lang, dir, appleTouchIcons
        and icons. Empty fields are left out.

    Raises:
        InvalidArgumentError: document is None
        NotFoundError: Every field was empty
    """
    document = require_document(document)

    html = document.first("html")
    title = document.first("title")

    cluttered: dict[str, Any] = {
        key: _first_attr(document, selector, attribute)
        for key, selector, attribute in _SINGLE_FIELDS
    }
    cluttered["title"] = title.text().strip() if title is not None else None
    if html is not None:
        cluttered["lang"] = html.attr("lang") or html.attr("xml:lang")
        cluttered["dir"] = html.attr("dir")
    cluttered["appleTouchIcons"] = _icons(
        document, 'link[rel="apple-touch-icon"], link[rel="apple-touch-icon-precomposed"]'
    )
    cluttered["icons"] = _icons(document, 'link[rel="icon"], link[rel="shortcut icon"]')

    meta = {key: value for key, value in cluttered.items() if value}

    if not meta:
        raise NotFoundError("No general metadata found in page", format_key="general")

    return meta
