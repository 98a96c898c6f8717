"""
Schema.org microdata extraction.

Produces the W3C "microdata to JSON" shape:

    {"items": [{"type": ["http://schema.org/Movie"],
                "properties": {"name": ["Avatar"],
                               "director": [{"type": [...], "properties": {...}}]}}]}

Every property value is a list; nested itemscope elements become nested
items.
"""

from typing import Any

from bs4 import Tag

from html_metadata.core.exceptions import NotFoundError
from html_metadata.extraction.document import Document, require_document

# Elements whose property value is a URL attribute
_URL_ATTRIBUTES = {
    "audio": "src",
    "embed": "src",
    "iframe": "src",
    "img": "src",
    "source": "src",
    "track": "src",
    "video": "src",
    "a": "href",
    "area": "href",
    "link": "href",
    "object": "data",
}


def _property_value(tag: Tag) -> Any:
    if tag.get("itemscope") is not None:
        return _parse_item(tag)

    name = (tag.name or "").lower()
    if name == "meta":
        return tag.get("content", "")
    if name in _URL_ATTRIBUTES:
        return tag.get(_URL_ATTRIBUTES[name], "")
    if name in ("data", "meter"):
        return tag.get("value", "")
    if name == "time" and tag.get("datetime") is not None:
        return tag.get("datetime")
    return tag.get_text()


def _collect_properties(scope: Tag, properties: dict[str, list[Any]]) -> None:
    """Gather itemprop descendants of scope, stopping at nested itemscopes."""
    for child in scope.children:
        if not isinstance(child, Tag):
            continue

        names = child.get("itemprop")
        if names:
            value = _property_value(child)
            for name in str(names).split():
                properties.setdefault(name, []).append(value)

        # A nested item owns everything below it
        if child.get("itemscope") is None:
            _collect_properties(child, properties)


def _parse_item(scope: Tag) -> dict[str, Any]:
    item: dict[str, Any] = {}

    item_type = scope.get("itemtype")
    if item_type:
        item["type"] = str(item_type).split()

    item_id = scope.get("itemid")
    if item_id:
        item["id"] = item_id

    properties: dict[str, list[Any]] = {}
    _collect_properties(scope, properties)
    item["properties"] = properties

    return item


def extract_microdata(document: Document) -> dict[str, list[dict[str, Any]]]:
    """Return every top-level microdata item of a document."""
    document = require_document(document)
    items = [
        _parse_item(tag)
        for tag in document.iter_tags("[itemscope]")
        if tag.get("itemprop") is None
    ]
    return {"items": items}


def parse_schema_org_microdata(document: Document) -> dict[str, list[dict[str, Any]]]:
    """
    Scrape schema.org microdata.

    Raises:
        InvalidArgumentError: document is None
        NotFoundError: The page has no microdata items
    """
    meta = extract_microdata(document)
    if not meta["items"]:
        raise NotFoundError("No schema.org metadata found in page", format_key="schemaOrg")
    return meta
