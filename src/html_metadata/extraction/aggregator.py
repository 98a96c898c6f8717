"""
Run every metadata dialect against one document.

parse_all() fans the dialect parsers out to a thread pool and waits for
all of them to settle. Each parser owns its failure: a dialect that is
missing (or breaks) simply leaves its key out of the result. Only when
no dialect produced anything does the whole parse fail.
"""

from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, Iterable

from html_metadata.core.exceptions import (
    HtmlMetadataError,
    InvalidArgumentError,
    NotFoundError,
)
from html_metadata.extraction.coins import parse_coins
from html_metadata.extraction.dialects import (
    parse_bepress,
    parse_dublin_core,
    parse_eprints,
    parse_highwire_press,
    parse_prism,
)
from html_metadata.extraction.document import Document, require_document
from html_metadata.extraction.general import parse_general
from html_metadata.extraction.json_ld import parse_json_ld
from html_metadata.extraction.microdata import parse_schema_org_microdata
from html_metadata.extraction.open_graph import parse_open_graph
from html_metadata.extraction.twitter import parse_twitter
from html_metadata.utils.logging import get_logger

logger = get_logger(__name__)

Parser = Callable[[Document], Any]

# Format key -> dialect parser, in output order
METADATA_FUNCTIONS: dict[str, Parser] = {
    "bePress": parse_bepress,
    "coins": parse_coins,
    "dublinCore": parse_dublin_core,
    "eprints": parse_eprints,
    "general": parse_general,
    "highwirePress": parse_highwire_press,
    "jsonLd": parse_json_ld,
    "openGraph": parse_open_graph,
    "schemaOrg": parse_schema_org_microdata,
    "twitter": parse_twitter,
    "prism": parse_prism,
}

# Dialects whose result is not a flat property map
_NESTED_FORMATS = frozenset({"coins", "jsonLd", "schemaOrg"})

NO_METADATA = "No metadata found in page"


def get_parser(format_key: str) -> Parser:
    """Return the parser registered under a format key."""
    try:
        return METADATA_FUNCTIONS[format_key]
    except KeyError:
        raise InvalidArgumentError(
            f"Unknown metadata format: {format_key}",
            argument="format_key",
            details={"known": sorted(METADATA_FUNCTIONS)},
        ) from None


def _select(formats: Iterable[str] | None) -> dict[str, Parser]:
    if not formats:
        return dict(METADATA_FUNCTIONS)
    return {key: get_parser(key) for key in formats}


def _settle(key: str, future: "Future[Any]") -> Any:
    """Return a parser's result, or None when it failed."""
    try:
        return future.result()
    except HtmlMetadataError as e:
        logger.debug(f"{key}: {e}")
    except Exception:
        logger.warning(f"{key} parser failed unexpectedly", exc_info=True)
    return None


def parse_all(
    document: Document,
    formats: Iterable[str] | None = None,
    max_workers: int | None = None,
) -> dict[str, Any]:
    """
    Extract every available metadata dialect from a document.

    Args:
        document: Document to scrape
        formats: Format keys to run; None runs every registered dialect
        max_workers: Thread pool size; defaults to one thread per dialect

    Returns:
        Mapping of format key to that dialect's metadata, in registration
        order, leaving out dialects that found nothing

    Raises:
        InvalidArgumentError: document is None or a format key is unknown
        NotFoundError: No dialect found any metadata
    """
    document = require_document(document)
    selected = _select(formats)

    with ThreadPoolExecutor(max_workers=max_workers or len(selected)) as executor:
        futures = {key: executor.submit(fn, document) for key, fn in selected.items()}

    meta: dict[str, Any] = {}
    for key, future in futures.items():
        result = _settle(key, future)
        if result:
            meta[key] = result

    logger.debug(f"Found {len(meta)}/{len(selected)} metadata formats: {', '.join(meta)}")

    if not meta:
        raise NotFoundError(NO_METADATA)

    return meta


def parse_all_merged(
    document: Document,
    formats: Iterable[str] | None = None,
) -> dict[str, list[Any]]:
    """
    Merge every dialect into one flat mapping of lists.

    Dialects run in registration order. Each property collects the values
    of every dialect that has it, so "title" may hold the Dublin Core,
    OpenGraph and HTML titles together. COinS, JSON-LD and microdata are
    kept whole under their format key.

    Raises:
        InvalidArgumentError: document is None or a format key is unknown
        NotFoundError: No dialect found any metadata
    """
    document = require_document(document)

    merged: dict[str, list[Any]] = {}
    for key, fn in _select(formats).items():
        try:
            result = fn(document)
        except HtmlMetadataError as e:
            logger.debug(f"{key}: {e}")
            continue
        if not result:
            continue

        items = [(key, result)] if key in _NESTED_FORMATS else result.items()
        for prop, value in items:
            bucket = merged.setdefault(prop, [])
            if isinstance(value, list):
                bucket.extend(value)
            else:
                bucket.append(value)

    if not merged:
        raise NotFoundError(NO_METADATA)

    return merged
