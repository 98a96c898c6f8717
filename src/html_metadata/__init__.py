"""
html-metadata - structured metadata extraction from HTML pages.

Extracts Dublin Core, OpenGraph, Twitter Cards, schema.org microdata,
COinS, BEPress, Highwire Press, EPrints, PRISM, JSON-LD and general head
metadata into one mapping keyed by format.
"""

from html_metadata.config import Settings, load_config
from html_metadata.utils.logging import setup_logging, get_logger
from html_metadata.core.exceptions import (
    HtmlMetadataError,
    InvalidArgumentError,
    NotFoundError,
    FetchError,
)
from html_metadata.extraction import (
    Document,
    METADATA_FUNCTIONS,
    parse_all,
    parse_all_merged,
    parse_bepress,
    parse_coins,
    parse_coins_title,
    parse_dublin_core,
    parse_eprints,
    parse_general,
    parse_highwire_press,
    parse_json_ld,
    parse_open_graph,
    parse_prism,
    parse_schema_org_microdata,
    parse_twitter,
)
from html_metadata.loader import load_from_file, load_from_string, load_from_url

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "load_config",
    "setup_logging",
    "get_logger",
    "HtmlMetadataError",
    "InvalidArgumentError",
    "NotFoundError",
    "FetchError",
    "Document",
    "METADATA_FUNCTIONS",
    "parse_all",
    "parse_all_merged",
    "parse_bepress",
    "parse_coins",
    "parse_coins_title",
    "parse_dublin_core",
    "parse_eprints",
    "parse_general",
    "parse_highwire_press",
    "parse_json_ld",
    "parse_open_graph",
    "parse_prism",
    "parse_schema_org_microdata",
    "parse_twitter",
    "load_from_file",
    "load_from_string",
    "load_from_url",
]
