"""
COinS (ContextObjects in Spans) parser.

A COinS span carries an OpenURL ContextObject in its title attribute:

    <span class="Z3988"
          title="ctx_ver=Z39.88-2004&amp;rft.atitle=Foo+Bar&amp;rft.au=A&amp;rft.au=B">

Top-level keys (ctx_ver, rft_id, ...) stay flat; "rft."-prefixed keys
are collected into a nested "rft" object.
"""

from typing import Any
from urllib.parse import unquote

from html_metadata.core.exceptions import InvalidArgumentError, NotFoundError
from html_metadata.extraction.document import Document, require_document
from html_metadata.utils.logging import get_logger

logger = get_logger(__name__)

# rft fields that may legitimately repeat; always returned as lists
MULTI_VALUE_FIELDS = frozenset({"au", "isbn", "issn", "eissn", "aucorp"})


def _decode(value: str) -> str:
    # "+" is a form-encoded space; a literal plus arrives as %2B
    return unquote(value.replace("+", "%20"), errors="strict")


def parse_coins_title(title: Any) -> dict[str, Any]:
    """
    Decode the title attribute of a single COinS span.

    Args:
        title: Raw title string; HTML-escaped ampersands are accepted

    Returns:
        Mapping of top-level keys, plus an "rft" mapping when any
        rft.* keys were present

    Pairs without "=" or with an empty key are dropped. A value whose
    escapes decode to invalid UTF-8 is dropped too, while a malformed
    escape such as "%ZZ" is kept literally.

    Raises:
        InvalidArgumentError: title is not a string
        NotFoundError: No valid key/value pair was found

    Example:
        >>> parse_coins_title("rft.genre=Article&rft.au=A+B")
        {'rft': {'genre': 'article', 'au': ['A B']}}
    """
    if not isinstance(title, str):
        raise InvalidArgumentError(
            f"Provided value must be a string; Got {type(title).__name__}",
            argument="title",
        )

    metadata: dict[str, Any] = {}
    rft: dict[str, Any] = {}

    for pair in title.replace("&amp;", "&").split("&"):
        parts = pair.split("=", 1)
        if len(parts) != 2 or not parts[0]:
            continue

        key = parts[0].lower()
        try:
            value = _decode(parts[1])
        except UnicodeDecodeError:
            logger.debug(f"Skipping undecodable COinS value for {key!r}")
            continue

        segments = key.split(".")
        if len(segments) == 1:
            metadata[key] = value
        elif len(segments) == 2 and segments[0] == "rft" and segments[1]:
            field = segments[1]
            if field in MULTI_VALUE_FIELDS:
                rft.setdefault(field, []).append(value)
            else:
                rft[field] = value

    if rft:
        if isinstance(rft.get("genre"), str):
            rft["genre"] = rft["genre"].lower()
        metadata["rft"] = rft

    if not metadata:
        raise NotFoundError("No COinS in provided string", format_key="coins")

    return metadata


def parse_coins(document: Document) -> list[dict[str, Any]]:
    """
    Decode every COinS span of a document.

    Spans that fail to decode are skipped; the others are returned in
    document order.

    Raises:
        InvalidArgumentError: document is None
        NotFoundError: No span decoded successfully
    """
    document = require_document(document)

    results: list[dict[str, Any]] = []
    for element in document.query("span[class=Z3988]"):
        try:
            results.append(parse_coins_title(element.attr("title")))
        except (InvalidArgumentError, NotFoundError) as e:
            logger.debug(f"Skipping COinS span: {e}")

    if not results:
        raise NotFoundError("No COinS metadata found", format_key="coins")

    return results
