"""
Citation and catalogue dialects built on the base attribute scraper.

Each dialect recognises its tags by a name prefix:

    Dublin Core     <meta name="DC.title">, <link rel="DCTERMS.creator">
    BEPress         <meta name="bepress_citation_title">
    EPrints         <meta name="eprints.creators_name">
    Highwire Press  <meta name="citation_title">
    PRISM           <meta name="prism.publicationName">

Prefix matching is case-insensitive; property names are normalized as
described on each parser.
"""

from html_metadata.extraction.base import parse_base
from html_metadata.extraction.document import Document, Element
from html_metadata.extraction.values import MetadataMap, lower_first, lower_value

_DC_PREFIXES = ("dc.", "dcterms.")
_BEPRESS_PREFIX = "bepress_citation_"
_EPRINTS_PREFIX = "eprints."
_HIGHWIRE_PREFIX = "citation_"


def _meta_content(element: Element) -> str | None:
    return element.attr("content")


# =============================================================================
# Dublin Core
# =============================================================================


def _dublin_core_property(element: Element) -> str | None:
    is_link = element.tag_name == "link"
    name_attr = element.attr("rel" if is_link else "name")
    if not name_attr or not name_attr.lower().startswith(_DC_PREFIXES):
        return None
    return lower_first(name_attr[name_attr.rfind(".") + 1:]) or None


def _dublin_core_content(element: Element) -> str | None:
    return element.attr("href" if element.tag_name == "link" else "content")


def parse_dublin_core(document: Document) -> MetadataMap:
    """
    Scrape Dublin Core metadata from meta and link tags.

    The property is the part after the last dot with its first letter
    lowercased, so "DC.Title" and "DCTERMS.title" both become "title".
    """
    return parse_base(
        document,
        ["meta", "link"],
        "No Dublin Core metadata found in page",
        _dublin_core_property,
        _dublin_core_content,
        format_key="dublinCore",
    )


# =============================================================================
# BEPress
# =============================================================================


def _bepress_property(element: Element) -> str | None:
    name_attr = element.attr("name")
    if not name_attr or not name_attr.lower().startswith(_BEPRESS_PREFIX):
        return None
    return name_attr[len(_BEPRESS_PREFIX):].lower() or None


def parse_bepress(document: Document) -> MetadataMap:
    """Scrape bepress_citation_* meta tags; property is the lowercased remainder."""
    return parse_base(
        document,
        ["meta"],
        "No BE Press metadata found in page",
        _bepress_property,
        _meta_content,
        format_key="bePress",
    )


# =============================================================================
# EPrints
# =============================================================================


def _eprints_property(element: Element) -> str | None:
    name_attr = element.attr("name")
    if not name_attr or not name_attr.lower().startswith(_EPRINTS_PREFIX):
        return None
    return name_attr[name_attr.rfind(".") + 1:].lower() or None


def parse_eprints(document: Document) -> MetadataMap:
    """
    Scrape eprints.* meta tags.

    The eprint type ("Article", "Conference_Item", ...) is lowercased so
    callers can compare it directly.
    """
    meta = parse_base(
        document,
        ["meta"],
        "No EPrints metadata found in page",
        _eprints_property,
        _meta_content,
        format_key="eprints",
    )
    if "type" in meta:
        meta["type"] = lower_value(meta["type"])
    return meta


# =============================================================================
# Highwire Press
# =============================================================================


def _highwire_property(element: Element) -> str | None:
    name_attr = element.attr("name")
    if not name_attr or not name_attr.lower().startswith(_HIGHWIRE_PREFIX):
        return None
    return name_attr[name_attr.find("_") + 1:].lower() or None


def parse_highwire_press(document: Document) -> MetadataMap:
    """Scrape citation_* meta tags; property is everything after the first underscore."""
    return parse_base(
        document,
        ["meta"],
        "No Highwire Press metadata found in page",
        _highwire_property,
        _meta_content,
        format_key="highwirePress",
    )


# =============================================================================
# PRISM
# =============================================================================


def _prism_property(element: Element) -> str | None:
    name_attr = element.attr("name")
    if not name_attr:
        return None
    parts = name_attr.split(".")
    if len(parts) < 2 or parts[0].lower() != "prism":
        return None
    return lower_first(parts[1]) or None


def parse_prism(document: Document) -> MetadataMap:
    """Scrape prism.* meta tags, e.g. prism.publicationDate -> publicationDate."""
    return parse_base(
        document,
        ["meta"],
        "No PRISM metadata found in page",
        _prism_property,
        _meta_content,
        format_key="prism",
    )
