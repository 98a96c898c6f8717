"""
CLI module for html-metadata.

Provides command-line interface using Typer:
- parse: Extract metadata from a URL or HTML file
- formats: List supported metadata formats
- config: Configuration management
"""

from html_metadata.cli.main import app

__all__ = ["app"]
