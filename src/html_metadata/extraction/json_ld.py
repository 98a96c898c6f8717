"""JSON-LD structured data collected from application/ld+json script blocks."""

import json
from typing import Any

from html_metadata.core.exceptions import NotFoundError
from html_metadata.extraction.document import Document, require_document
from html_metadata.utils.logging import get_logger

logger = get_logger(__name__)


def parse_json_ld(document: Document) -> Any:
    """
    Parse every JSON-LD block of a document.

    Malformed blocks are skipped. A single block is returned as-is;
    several blocks come back as a list in document order.

    Raises:
        InvalidArgumentError: document is None
        NotFoundError: No block could be parsed
    """
    document = require_document(document)

    blocks: list[Any] = []
    for script in document.query('script[type="application/ld+json"]'):
        text = script.text().strip()
        if not text:
            continue
        try:
            blocks.append(json.loads(text))
        except json.JSONDecodeError as e:
            logger.debug(f"Failed to parse JSON-LD: {e}")

    if not blocks:
        raise NotFoundError("No JSON-LD valid script tags present on page", format_key="jsonLd")

    return blocks[0] if len(blocks) == 1 else blocks
