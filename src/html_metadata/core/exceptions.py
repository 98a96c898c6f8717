"""
Custom exceptions for html-metadata.

Provides a small hierarchy of exceptions so callers can tell a missing
metadata dialect apart from bad input or a failed fetch. All exceptions
inherit from HtmlMetadataError.

Exception Hierarchy:
    HtmlMetadataError (base)
    ├── ConfigurationError
    ├── InvalidArgumentError
    ├── FetchError
    └── ExtractionError
        └── NotFoundError
"""

from typing import Any


class HtmlMetadataError(Exception):
    """
    Base exception for all html-metadata errors.

    Attributes:
        message: Human-readable error description
        details: Optional dictionary with additional context
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(
                f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, details={self.details!r})"


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(HtmlMetadataError):
    """
    Error in configuration loading or validation.

    Raised when:
    - Configuration file is malformed
    - Setting values fail validation
    """

    pass


# =============================================================================
# Input Errors
# =============================================================================


class InvalidArgumentError(HtmlMetadataError):
    """
    Caller passed something the parsers cannot work with.

    Raised when:
    - No document is given to a parser
    - A COinS title is not a string
    - An unknown format key is requested
    """

    def __init__(
        self,
        message: str,
        argument: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if argument:
            details["argument"] = argument
        super().__init__(message, details)
        self.argument = argument


# =============================================================================
# Fetch Errors
# =============================================================================


class FetchError(HtmlMetadataError):
    """
    Error retrieving a page for the URL loader.

    Raised when:
    - The transport fails (DNS, connection, timeout)
    - The server answers with a non-success status

    Never retried by this library.
    """

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if url:
            details["url"] = url
        if status_code:
            details["status_code"] = status_code
        super().__init__(message, details)
        self.url = url
        self.status_code = status_code


# =============================================================================
# Extraction Errors
# =============================================================================


class ExtractionError(HtmlMetadataError):
    """
    Base error for metadata extraction.

    Raised for extraction failures not covered by more specific
    subclasses.
    """

    pass


class NotFoundError(ExtractionError):
    """
    The markers of a metadata dialect are absent or yielded nothing.

    Recoverable: the aggregator treats it as "this format produced
    nothing" and carries on with the other dialects.
    """

    def __init__(
        self,
        reason: str,
        format_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if format_key:
            details["format"] = format_key
        super().__init__(reason, details)
        self.reason = reason
        self.format_key = format_key
