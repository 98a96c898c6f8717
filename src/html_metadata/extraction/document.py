"""
Queryable document wrapper around a BeautifulSoup tree.

Every dialect parser talks to the page only through Document.query()
and the Element accessors, so the parsers never depend on which tree
builder loaded the HTML.
"""

from pathlib import Path
from typing import Iterator

from bs4 import BeautifulSoup, Tag

from html_metadata.core.exceptions import InvalidArgumentError
from html_metadata.utils.logging import get_logger

logger = get_logger(__name__)


class Element:
    """
    A single tag of a Document.

    Attribute values are always plain strings: multi-valued HTML
    attributes such as rel and class come back exactly as written.
    """

    __slots__ = ("_tag",)

    def __init__(self, tag: Tag) -> None:
        self._tag = tag

    @property
    def tag_name(self) -> str:
        """Lowercase tag name, e.g. "meta"."""
        return (self._tag.name or "").lower()

    def attr(self, name: str) -> str | None:
        """Return an attribute value, or None when the attribute is absent."""
        value = self._tag.get(name)
        if value is None:
            return None
        if isinstance(value, list):
            return " ".join(value)
        return value

    def text(self) -> str:
        """Concatenated text content of the element."""
        return self._tag.get_text()

    def __repr__(self) -> str:
        return f"Element({self.tag_name!r}, attrs={dict(self._tag.attrs)!r})"


class Document:
    """
    Read-only, queryable HTML document.

    Example:
        >>> doc = Document.from_string('<meta name="DC.title" content="X">')
        >>> [el.attr("content") for el in doc.query("meta")]
        ['X']
    """

    def __init__(self, soup: BeautifulSoup) -> None:
        if not isinstance(soup, BeautifulSoup):
            raise InvalidArgumentError(
                "Document requires a BeautifulSoup tree",
                argument="soup",
                details={"type": type(soup).__name__},
            )
        self._soup = soup

    @classmethod
    def from_string(cls, html: str | bytes, backend: str = "html.parser") -> "Document":
        """
        Parse HTML text into a Document.

        Args:
            html: HTML markup (bytes are decoded by BeautifulSoup)
            backend: BeautifulSoup tree builder name

        Returns:
            Parsed Document
        """
        if not isinstance(html, (str, bytes)):
            raise InvalidArgumentError(
                "HTML must be str or bytes",
                argument="html",
                details={"type": type(html).__name__},
            )
        soup = BeautifulSoup(html, backend, multi_valued_attributes=None)
        return cls(soup)

    @classmethod
    def from_file(cls, path: Path | str, backend: str = "html.parser") -> "Document":
        """Read and parse an HTML file."""
        path = Path(path)
        if not path.is_file():
            raise InvalidArgumentError(
                "HTML file not found",
                argument="path",
                details={"path": str(path)},
            )
        logger.debug(f"Loading document from {path}")
        return cls.from_string(path.read_bytes(), backend=backend)

    @property
    def soup(self) -> BeautifulSoup:
        """Underlying BeautifulSoup tree."""
        return self._soup

    def query(self, selector: str) -> list[Element]:
        """Return every element matching a CSS selector, in document order."""
        return [Element(tag) for tag in self._soup.select(selector)]

    def first(self, selector: str) -> Element | None:
        """Return the first element matching a CSS selector, if any."""
        tag = self._soup.select_one(selector)
        return Element(tag) if tag is not None else None

    def iter_tags(self, selector: str) -> Iterator[Tag]:
        """Yield raw BeautifulSoup tags for tree-walking parsers."""
        yield from self._soup.select(selector)


def require_document(document: Document | None) -> Document:
    """Raise InvalidArgumentError unless a Document was given."""
    if document is None:
        raise InvalidArgumentError("Undefined argument", argument="document")
    if not isinstance(document, Document):
        raise InvalidArgumentError(
            "Expected a Document",
            argument="document",
            details={"type": type(document).__name__},
        )
    return document
