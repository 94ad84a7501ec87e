"""
Main Terabox extractor - the core extraction pipeline.
Scrapes the share page and rebuilds download links from its embedded data.
"""
from typing import Optional
import logging

from ..domains.resolver import DomainResolver
from ..exceptions import ExtractionError, InvalidUrlError
from .fetcher import PageFetcher
from .links import LinkSynthesizer
from .normalizer import LinkNormalizer
from .parser import build_file_info, extract_identifier, parse_page_data
from .response import ExtractionResult

logger = logging.getLogger(__name__)


class TeraboxExtractor:
    """
    Extracts file metadata and links from a Terabox share URL.

    Stages run strictly in order and the first failure ends the extraction.
    """

    def __init__(
        self,
        fetcher: Optional[PageFetcher] = None,
        domain_resolver: Optional[DomainResolver] = None,
        synthesizer: Optional[LinkSynthesizer] = None,
        normalizer: Optional[LinkNormalizer] = None,
        page_data_variable: Optional[str] = None,
    ):
        self.fetcher = fetcher or PageFetcher()
        self.domain_resolver = domain_resolver or DomainResolver()
        self.synthesizer = synthesizer or LinkSynthesizer()
        self.normalizer = normalizer or LinkNormalizer()
        self.page_data_variable = page_data_variable

    async def close(self):
        """Clean up resources."""
        await self.fetcher.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def extract(self, url: str) -> ExtractionResult:
        """
        Extract file information from a Terabox link.

        Args:
            url: Any Terabox share URL

        Returns:
            ExtractionResult, a failure for any recognized extraction error.
            Unexpected exceptions are left to the caller.
        """
        logger.info(f"Extracting from: {url}")

        try:
            return await self._extract(url)
        except ExtractionError as e:
            logger.warning(f"Extraction failed ({e.kind}) for {url}: {e.message}")
            return ExtractionResult.failure(e.message, e.kind)

    async def _extract(self, url: str) -> ExtractionResult:
        # Step 1: Validate URL
        normalized_url = self.domain_resolver.normalize_url(url)
        if not normalized_url:
            raise InvalidUrlError()

        # Step 2: Fetch share page
        html = await self.fetcher.fetch(normalized_url)

        # Step 3: Identifier and embedded data
        identifier = extract_identifier(normalized_url, html)
        logger.info(f"Extracted identifier: {identifier}")

        record, context = parse_page_data(html, self.page_data_variable)

        # Step 4: Links
        info = build_file_info(record, context, self.synthesizer)
        short_link = self.normalizer.build_short_link(identifier)

        logger.info(f"Extracted {info.title!r} ({info.size})")
        return ExtractionResult.success(info, short_link)
