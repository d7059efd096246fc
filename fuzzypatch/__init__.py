"""Fuzzy search-and-replace patching driven by SEARCH/REPLACE blocks."""

__version__ = "0.1.0"
__all__ = ["apply", "parse"]