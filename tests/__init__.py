"""
Test suite for html-metadata.

- Unit tests per metadata dialect
- Aggregation, loader, configuration and CLI tests
- Fixtures for sample documents in conftest.py
"""
