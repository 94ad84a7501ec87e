"""
Terabox domain resolver.
Validates share URLs against the configured Terabox domains and mirrors.
"""
import re
from typing import Iterable, List, Optional
from urllib.parse import urlparse
import logging

from ..config import config

logger = logging.getLogger(__name__)


class DomainResolver:
    """
    Checks that a URL belongs to the Terabox ecosystem.

    Hosts are matched by substring after stripping a leading ``www.``, so
    subdomains and regional variants of an allowed host are accepted too.
    Shortened share links are passed through as-is; redirects are not
    followed.
    """

    SHARE_PATTERN = re.compile(r"/s/([A-Za-z0-9_-]+)")

    def __init__(self, allowed_hosts: Optional[Iterable[str]] = None):
        hosts = allowed_hosts if allowed_hosts is not None else config.allowed_hosts
        self.allowed_hosts: List[str] = [host.lower() for host in hosts]

    def is_terabox_url(self, url: str) -> bool:
        """Check if URL belongs to Terabox ecosystem."""
        if not url or not isinstance(url, str):
            return False

        try:
            parsed = urlparse(url.strip())
            hostname = parsed.hostname
            # out-of-range or non-numeric ports only fail on access
            parsed.port
        except ValueError as e:
            logger.debug(f"Could not parse URL {url!r}: {e}")
            return False

        if parsed.scheme not in ("http", "https") or not hostname:
            return False

        if hostname.startswith("www."):
            hostname = hostname[len("www."):]

        return any(known in hostname for known in self.allowed_hosts)

    def normalize_url(self, url: str) -> Optional[str]:
        """
        Validate a share URL.

        Args:
            url: Raw user-supplied URL

        Returns:
            The URL, stripped of surrounding whitespace, when it is a
            Terabox URL, otherwise None
        """
        if isinstance(url, str):
            url = url.strip()
        if not self.is_terabox_url(url):
            logger.debug(f"Rejected non-Terabox URL: {url!r}")
            return None
        return url

    @classmethod
    def extract_surl(cls, url: str) -> Optional[str]:
        """Extract the share token from a ``/s/<token>`` path."""
        match = cls.SHARE_PATTERN.search(url or "")
        if match:
            return match.group(1)
        return None
