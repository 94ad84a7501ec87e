"""
HTTP utility functions.
Provides browser-like headers, SSL configuration and connector setup.
"""
import ssl
import certifi
from typing import Dict, Optional
import logging
from aiohttp import TCPConnector
from fake_useragent import UserAgent

logger = logging.getLogger(__name__)


FALLBACK_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/122.0.0.0 Safari/537.36"
)

# Default headers that mimic a real browser; caching is disabled so the
# share page is always rendered fresh.
DEFAULT_HEADERS = {
    "User-Agent": FALLBACK_USER_AGENT,
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
    "Cache-Control": "no-cache",
    "Pragma": "no-cache",
}

_user_agent: Optional[UserAgent] = None


def get_user_agent() -> str:
    """Get a realistic desktop user agent."""
    global _user_agent
    try:
        if _user_agent is None:
            _user_agent = UserAgent(browsers=["chrome", "edge"])
        return _user_agent.chrome
    except Exception as e:
        logger.debug(f"fake_useragent unavailable, using fallback: {e}")
        return FALLBACK_USER_AGENT


def browser_headers(extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    """
    Build request headers that mimic a desktop browser.

    Args:
        extra: Headers to add or override

    Returns:
        Header dictionary
    """
    headers = DEFAULT_HEADERS.copy()
    headers["User-Agent"] = get_user_agent()
    if extra:
        headers.update(extra)
    return headers


def create_ssl_context(verify: bool = True) -> ssl.SSLContext:
    """
    Create an SSL context with proper configuration.

    Args:
        verify: Whether to verify SSL certificates

    Returns:
        Configured SSL context
    """
    if verify:
        ssl_context = ssl.create_default_context(cafile=certifi.where())
        ssl_context.check_hostname = True
        ssl_context.verify_mode = ssl.CERT_REQUIRED
    else:
        ssl_context = ssl.create_default_context()
        ssl_context.check_hostname = False
        ssl_context.verify_mode = ssl.CERT_NONE

    return ssl_context


def create_connector(
    limit: int = 100,
    limit_per_host: int = 30,
    ttl_dns_cache: int = 300,
    ssl_verify: bool = True,
) -> TCPConnector:
    """
    Create a TCP connector with pooled connections.

    Args:
        limit: Total connection pool limit
        limit_per_host: Connection limit per host
        ttl_dns_cache: DNS cache TTL in seconds
        ssl_verify: Whether to verify SSL certificates

    Returns:
        Configured TCP connector
    """
    ssl_context = create_ssl_context(verify=ssl_verify)

    return TCPConnector(
        limit=limit,
        limit_per_host=limit_per_host,
        ttl_dns_cache=ttl_dns_cache,
        ssl=ssl_context,
    )
