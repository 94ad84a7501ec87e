"""Terabox share link extractor."""

__version__ = "1.0.0"
