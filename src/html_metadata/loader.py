"""
Convenience entry points: build a Document from a string, a file or a URL
and run every dialect parser over it.

Fetching is a single GET: no retries, no rate limiting.
"""

from pathlib import Path
from typing import Any

import httpx

from html_metadata.config import Settings, get_settings
from html_metadata.core.exceptions import FetchError
from html_metadata.extraction import Document, parse_all
from html_metadata.utils.logging import get_logger

logger = get_logger(__name__)


def _run(document: Document, settings: Settings) -> dict[str, Any]:
    return parse_all(
        document,
        formats=settings.parser.formats or None,
        max_workers=settings.parser.max_workers,
    )


def load_from_string(html: str | bytes, settings: Settings | None = None) -> dict[str, Any]:
    """
    Extract all metadata from an HTML string.

    Raises:
        InvalidArgumentError: html is neither str nor bytes
        NotFoundError: No metadata found in page
    """
    settings = settings or get_settings()
    document = Document.from_string(html, backend=settings.parser.backend)
    return _run(document, settings)


def load_from_file(path: Path | str, settings: Settings | None = None) -> dict[str, Any]:
    """
    Extract all metadata from an HTML file.

    Raises:
        InvalidArgumentError: The file does not exist
        NotFoundError: No metadata found in page
    """
    settings = settings or get_settings()
    document = Document.from_file(path, backend=settings.parser.backend)
    return _run(document, settings)


async def fetch_html(
    url: str,
    settings: Settings | None = None,
    client: httpx.AsyncClient | None = None,
) -> str:
    """
    GET a page and return its decoded body.

    Args:
        url: Absolute http(s) URL
        settings: Settings providing user agent, timeout and redirect policy
        client: Optional shared client; one is created and closed otherwise

    Raises:
        FetchError: Transport failure, non-success status or oversized body
    """
    settings = settings or get_settings()
    fetch = settings.fetch
    owns_client = client is None
    if client is None:
        client = httpx.AsyncClient()

    try:
        response = await client.get(
            url,
            headers={"User-Agent": fetch.user_agent},
            timeout=fetch.timeout_seconds,
            follow_redirects=fetch.follow_redirects,
        )
    except httpx.HTTPError as e:
        raise FetchError(f"Request failed: {e}", url=url) from e
    finally:
        if owns_client:
            await client.aclose()

    if not response.is_success:
        raise FetchError(
            f"Unexpected HTTP status {response.status_code}",
            url=url,
            status_code=response.status_code,
        )

    if len(response.content) > fetch.max_bytes:
        raise FetchError(
            "Response body too large",
            url=url,
            details={"bytes": len(response.content), "max_bytes": fetch.max_bytes},
        )

    logger.debug(f"Fetched {len(response.content)} bytes from {url}")
    return response.text


async def load_from_url(
    url: str,
    settings: Settings | None = None,
    client: httpx.AsyncClient | None = None,
) -> dict[str, Any]:
    """
    Fetch a page and extract all of its metadata.

    Example:
        >>> metadata = asyncio.run(load_from_url("https://example.com"))
        >>> metadata["general"]["title"]

    Raises:
        FetchError: The page could not be retrieved
        NotFoundError: No metadata found in page
    """
    settings = settings or get_settings()
    html = await fetch_html(url, settings=settings, client=client)
    document = Document.from_string(html, backend=settings.parser.backend)
    return _run(document, settings)
