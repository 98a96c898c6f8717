"""
Extraction module for html-metadata.

Provides one parser per metadata dialect plus the aggregator that runs
them all:
- Dublin Core, BEPress, EPrints, Highwire Press, PRISM
- OpenGraph and Twitter Cards
- COinS
- JSON-LD and schema.org microdata
- General HTML head metadata
"""

from html_metadata.extraction.document import Document, Element
from html_metadata.extraction.values import MetadataMap, Value, upgrade
from html_metadata.extraction.base import parse_base
from html_metadata.extraction.dialects import (
    parse_bepress,
    parse_dublin_core,
    parse_eprints,
    parse_highwire_press,
    parse_prism,
)
from html_metadata.extraction.open_graph import OpenGraphState, parse_open_graph
from html_metadata.extraction.twitter import parse_twitter
from html_metadata.extraction.coins import parse_coins, parse_coins_title
from html_metadata.extraction.json_ld import parse_json_ld
from html_metadata.extraction.general import parse_general
from html_metadata.extraction.microdata import extract_microdata, parse_schema_org_microdata
from html_metadata.extraction.aggregator import (
    METADATA_FUNCTIONS,
    get_parser,
    parse_all,
    parse_all_merged,
)

__all__ = [
    # Document
    "Document",
    "Element",
    # Values
    "MetadataMap",
    "Value",
    "upgrade",
    # Dialects
    "parse_base",
    "parse_bepress",
    "parse_dublin_core",
    "parse_eprints",
    "parse_highwire_press",
    "parse_prism",
    "OpenGraphState",
    "parse_open_graph",
    "parse_twitter",
    "parse_coins",
    "parse_coins_title",
    "parse_json_ld",
    "parse_general",
    "extract_microdata",
    "parse_schema_org_microdata",
    # Aggregation
    "METADATA_FUNCTIONS",
    "get_parser",
    "parse_all",
    "parse_all_merged",
]
