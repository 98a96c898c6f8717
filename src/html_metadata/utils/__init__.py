"""
Utilities module for html-metadata.

Provides logging setup and helpers.
"""

from html_metadata.utils.logging import setup_logging, get_logger, reset_logging

__all__ = [
    "setup_logging",
    "get_logger",
    "reset_logging",
]
