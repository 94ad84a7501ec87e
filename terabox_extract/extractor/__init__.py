"""Terabox extraction module."""
from .terabox import TeraboxExtractor
from .fetcher import PageFetcher
from .links import LinkSynthesizer
from .normalizer import LinkNormalizer
from .response import ExtractionResult

__all__ = ["TeraboxExtractor", "PageFetcher", "LinkSynthesizer", "LinkNormalizer", "ExtractionResult"]
