"""
Shared pytest fixtures for html-metadata tests.

Provides reusable fixtures for:
- Configuration and settings
- Sample documents
- Temporary resources
"""

import tempfile
from pathlib import Path
from typing import Generator

import pytest

from html_metadata.config import Settings, reset_settings
from html_metadata.extraction import Document
from html_metadata.utils.logging import reset_logging


@pytest.fixture(autouse=True)
def reset_global_state():
    """Reset cached settings and logging handlers around each test."""
    reset_settings()
    reset_logging()
    yield
    reset_settings()
    reset_logging()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory that's cleaned up after the test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_settings() -> Settings:
    """Settings with a small worker pool."""
    return Settings(parser={"max_workers": 2})


@pytest.fixture
def turtle_article_html() -> str:
    """Article page carrying every supported metadata dialect."""
    return """
    <!DOCTYPE html>
    <html lang="en" dir="ltr">
    <head>
        <meta charset="UTF-8">
        <title>Turtles are AWESOME!!1 | Awesome Turtles Website</title>
        <meta name="author" content="Turtle Lvr">
        <meta name="description" content="Exposition on the awesomeness of turtles">
        <meta name="robots" content="we welcome our robot overlords">
        <link rel="author" href="http://examples.com/turtlelvr">
        <link rel="canonical" href="http://example.com/turtles">
        <link rel="publisher" href="https://mediawiki.org">
        <link rel="shortlink" href="http://example.com/c">
        <link rel="apple-touch-icon" href="/apple-touch-icon.png" sizes="152x152">
        <link rel="shortcut icon" href="/favicon.ico" type="image/x-icon">

        <meta name="DC.title" content="Turtles are AWESOME!!1">
        <meta name="DC.creator" content="Turtle Lvr">
        <meta name="DC.type" content="Text.Article">
        <meta name="DCTERMS.Subject" content="turtles">
        <meta name="DCTERMS.Subject" content="reptiles">
        <link rel="DC.source" href="http://example.com/source">

        <meta property="og:type" content="article">
        <meta property="og:title" content="Turtles are AWESOME!!1">
        <meta property="og:url" content="http://example.com/turtles">
        <meta property="og:image" content="http://example.com/turtle.jpg">
        <meta property="og:image:width" content="800">
        <meta property="article:author" content="http://examples.com/turtlelvr">
        <meta property="article:tag" content="turtles">
        <meta property="article:tag" content="shells">

        <meta name="twitter:card" content="summary">
        <meta name="twitter:site" content="@Turtles">
        <meta name="twitter:title" content="Turtles are AWESOME!!1">
        <meta name="twitter:image" content="http://example.com/turtle.jpg">

        <meta name="citation_title" content="Turtles are AWESOME!!1">
        <meta name="citation_author" content="Lvr, Turtle">
        <meta name="citation_author" content="Shell, Sam">
        <meta name="citation_journal_title" content="Journal of Turtles">

        <meta name="bepress_citation_title" content="Turtles are AWESOME!!1">
        <meta name="bepress_citation_author" content="Lvr, Turtle">

        <meta name="eprints.type" content="Article">
        <meta name="eprints.creators_name" content="Lvr, Turtle">

        <meta name="prism.publicationName" content="Journal of Turtles">
        <meta name="prism.volume" content="5">

        <script type="application/ld+json">
        {"@context": "http://schema.org", "@type": "Article", "headline": "Turtles are AWESOME!!1"}
        </script>
    </head>
    <body>
        <span class="Z3988" title="ctx_ver=Z39.88-2004&amp;rft.genre=Article&amp;rft.atitle=Turtles+are+Awesome&amp;rft.au=Turtle+Lvr"></span>
        <div itemscope itemtype="http://schema.org/Article">
            <h1 itemprop="headline">Turtles are AWESOME!!1</h1>
            <span itemprop="author" itemscope itemtype="http://schema.org/Person">
                <span itemprop="name">Turtle Lvr</span>
            </span>
        </div>
    </body>
    </html>
    """


@pytest.fixture
def turtle_article(turtle_article_html: str) -> Document:
    """Parsed turtle article."""
    return Document.from_string(turtle_article_html)


@pytest.fixture
def turtle_movie() -> Document:
    """OpenGraph video.movie page with a vertical namespace."""
    return Document.from_string("""
    <html>
    <head>
        <title>Turtles of the Jungle</title>
        <meta property="og:locale" content="en_US">
        <meta property="video:director" content="http://www.example.com/Ignored">
        <meta property="og:type" content="video.movie">
        <meta property="og:title" content="Turtles of the Jungle">
        <meta property="og:image" content="http://example.com/turtle.jpg">
        <meta property="og:image" content="http://example.com/shell.jpg">
        <meta property="og:tag" content="turtle">
        <meta property="og:tag" content="movie">
        <meta property="og:tag" content="awesome">
        <meta property="video:director" content="http://www.example.com/PhilTheTurtle">
        <meta property="video:actor" content="http://www.example.com/PatTheTurtle">
        <meta property="video:actor" content="http://www.example.com/SaminaTheTurtle">
        <meta property="video:release_date" content="2015-01-14T19:14:27+00:00">
    </head>
    <body></body>
    </html>
    """)


@pytest.fixture
def empty_document() -> Document:
    """Document without any recognizable metadata."""
    return Document.from_string("<html><body><p>Nothing to see here</p></body></html>")
