"""
Core module for html-metadata.

Contains the exception hierarchy shared by every dialect parser.
"""

from html_metadata.core.exceptions import (
    HtmlMetadataError,
    ConfigurationError,
    InvalidArgumentError,
    FetchError,
    ExtractionError,
    NotFoundError,
)

__all__ = [
    # Base
    "HtmlMetadataError",
    "ConfigurationError",
    # Input
    "InvalidArgumentError",
    # Fetch
    "FetchError",
    # Extraction
    "ExtractionError",
    "NotFoundError",
]
