"""
Tests for exception hierarchy.

Tests custom exceptions and error handling.
"""

import pytest

from html_metadata.core.exceptions import (
    HtmlMetadataError,
    ConfigurationError,
    InvalidArgumentError,
    FetchError,
    ExtractionError,
    NotFoundError,
)


class TestExceptionHierarchy:
    """Tests for exception inheritance."""

    def test_base_exception(self):
        """HtmlMetadataError should be the base for all custom exceptions."""
        exc = HtmlMetadataError("Test error")

        assert isinstance(exc, Exception)
        assert str(exc) == "Test error"

    @pytest.mark.parametrize(
        "exc_class",
        [ConfigurationError, InvalidArgumentError, FetchError, ExtractionError, NotFoundError],
    )
    def test_all_inherit_from_base(self, exc_class):
        """Every custom exception can be caught as HtmlMetadataError."""
        with pytest.raises(HtmlMetadataError):
            raise exc_class("failure")

    def test_not_found_is_extraction_error(self):
        """NotFoundError should inherit from ExtractionError."""
        assert issubclass(NotFoundError, ExtractionError)


class TestExceptionDetails:
    """Tests for exception context."""

    def test_details_rendered(self):
        """Details are appended to the message."""
        exc = HtmlMetadataError("Failed", details={"key": "value"})

        assert str(exc) == "Failed (key='value')"
        assert exc.message == "Failed"

    def test_not_found_reason(self):
        """NotFoundError keeps its reason and format key."""
        exc = NotFoundError("No COinS metadata found", format_key="coins")

        assert exc.reason == "No COinS metadata found"
        assert exc.format_key == "coins"
        assert exc.details == {"format": "coins"}

    def test_not_found_without_format(self):
        """Without a format key the message is the bare reason."""
        assert str(NotFoundError("No metadata found in page")) == "No metadata found in page"

    def test_invalid_argument(self):
        """InvalidArgumentError records the offending argument."""
        exc = InvalidArgumentError("Undefined argument", argument="document")

        assert exc.argument == "document"
        assert exc.details["argument"] == "document"

    def test_fetch_error(self):
        """FetchError records URL and status."""
        exc = FetchError("Unexpected HTTP status 404", url="http://x", status_code=404)

        assert exc.url == "http://x"
        assert exc.status_code == 404
        assert "status_code=404" in str(exc)

    def test_repr(self):
        """repr names the concrete class."""
        assert repr(ConfigurationError("bad")) == "ConfigurationError('bad', details={})"
