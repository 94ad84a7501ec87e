"""
Short link builder for Terabox shares.
"""
from typing import Optional

from ..config import config


class LinkNormalizer:
    """Builds canonical share links."""

    def __init__(self, host: Optional[str] = None):
        self.host = host or config.short_link_host

    def build_short_link(self, identifier: str) -> str:
        """Build a standard share URL from an identifier."""
        if not identifier:
            raise ValueError("identifier is required to build a short link")
        return f"https://{self.host}/s/{identifier}"
