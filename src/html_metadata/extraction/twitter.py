"""
Twitter Card parser.

Twitter tags nest up to four levels deep:

    twitter:card                       -> card = "summary"
    twitter:image                      -> image = "https://.../a.png"
    twitter:image:width                -> image = {"url": "...", "width": "..."}
    twitter:app:id:iphone              -> app = {"id": {"iphone": "..."}}
    twitter:player:stream:content_type -> player = {"stream": {"url": ..., "content_type": ...}}

image, player and creator are dual-state: they start as a plain value
and turn into an object as soon as a sub-property shows up, keeping the
plain value under their default key.
"""

from typing import Any

from html_metadata.core.exceptions import NotFoundError
from html_metadata.extraction.document import Document, require_document
from html_metadata.extraction.values import MetadataMap, is_group, merge_property
from html_metadata.utils.logging import get_logger

logger = get_logger(__name__)

# Dual-state properties and the key their plain value moves to
GROUPED_PROPERTIES = {
    "image": "url",
    "player": "url",
    "creator": "@username",
}

_NOT_FOUND = "No twitter metadata found in page"


def _group_node(meta: MetadataMap, prop: str) -> dict[str, Any]:
    """
    Return the object that sub-properties of prop attach to.

    An existing object is reused in place. For dual-state properties a
    plain value is promoted to {default_key: value}; when the property
    already repeated, the promotion applies to its last occurrence.
    Anything else gets a fresh object, merged by the caller.
    """
    existing = meta.get(prop)
    default_key = GROUPED_PROPERTIES.get(prop)

    if is_group(existing):
        return existing

    if isinstance(existing, list) and existing:
        last = existing[-1]
        if is_group(last):
            return last
        if default_key is not None:
            node = {default_key: last}
            meta[prop] = existing[:-1] + [node]
            return node

    if default_key is not None and isinstance(existing, str):
        node = {default_key: existing}
        meta[prop] = node
        return node

    return {}


def _process_tag(meta: MetadataMap, parts: list[str], content: str) -> None:
    prop = parts[1]

    if len(parts) == 2:
        merge_property(meta, prop, content)
        return

    if len(parts) > 4:
        logger.debug(f"Discarding malformed twitter property {':'.join(parts)!r}")
        return

    node = _group_node(meta, prop)
    sub_property = parts[2]

    if len(parts) == 3:
        node[sub_property] = content
    else:
        current = node.get(sub_property)
        if sub_property == "stream" and isinstance(current, str):
            node[sub_property] = {"url": current}
        elif not is_group(current):
            node[sub_property] = {}
        node[sub_property][parts[3]] = content

    existing = meta.get(prop)
    if existing is node or (isinstance(existing, list) and any(item is node for item in existing)):
        return
    merge_property(meta, prop, node)


def parse_twitter(document: Document) -> MetadataMap:
    """
    Scrape Twitter Card metadata from <meta name="twitter:...">.

    Args:
        document: Document to scrape

    Returns:
        Mapping of card property to value

    Raises:
        InvalidArgumentError: document is None
        NotFoundError: No twitter tags were found
    """
    document = require_document(document)
    meta_tags = document.query("meta")
    if not meta_tags:
        raise NotFoundError(_NOT_FOUND, format_key="twitter")

    meta: MetadataMap = {}
    for element in meta_tags:
        name = element.attr("name")
        content = element.attr("content")
        if not name or not content:
            continue
        parts = name.lower().split(":")
        if parts[0] != "twitter" or len(parts) < 2 or not parts[1]:
            continue
        _process_tag(meta, parts, content)

    if not meta:
        raise NotFoundError(_NOT_FOUND, format_key="twitter")

    return meta
