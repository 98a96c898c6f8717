"""
Generic attribute scraper shared by the simple tag-naming dialects.

Dublin Core, BEPress, EPrints, Highwire Press and PRISM differ only in
which tags they look at and how a property name and a value are read
from each tag, so each of them is a pair of small callables handed to
parse_base().
"""

from typing import Callable, Sequence

from html_metadata.core.exceptions import NotFoundError
from html_metadata.extraction.document import Document, Element, require_document
from html_metadata.extraction.values import MetadataMap, merge_property
from html_metadata.utils.logging import get_logger

logger = get_logger(__name__)

PropertyGetter = Callable[[Element], str | None]
ContentGetter = Callable[[Element], str | None]


def parse_base(
    document: Document,
    tags: Sequence[str],
    reason: str,
    get_property: PropertyGetter,
    get_content: ContentGetter,
    format_key: str | None = None,
) -> MetadataMap:
    """
    Walk every element matching tags and collect (property, value) pairs.

    Args:
        document: Document to scrape
        tags: Selectors to query, e.g. ["meta", "link"]
        reason: Message of the NotFoundError raised when nothing is found
        get_property: Returns the normalized property name, or None to skip
        get_content: Returns the value for the element
        format_key: Dialect key attached to errors and log records

    Returns:
        Mapping of property name to scalar or list of scalars

    Raises:
        NotFoundError: No element matched, or none yielded a property
    """
    document = require_document(document)
    elements = document.query(",".join(tags))

    if not elements:
        raise NotFoundError(reason, format_key=format_key)

    meta: MetadataMap = {}
    for element in elements:
        prop = get_property(element)
        if not prop:
            continue
        content = get_content(element)
        if content is None:
            logger.debug(f"Skipping {prop!r} without content [{format_key}]")
            continue
        merge_property(meta, prop, content)

    if not meta:
        raise NotFoundError(reason, format_key=format_key)

    return meta
