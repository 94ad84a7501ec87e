"""
Share page fetcher.
"""
import asyncio
from typing import Dict, Optional
import logging
import aiohttp

from ..config import config
from ..exceptions import FetchFailedError
from ..utils.http import browser_headers, create_connector

logger = logging.getLogger(__name__)


class PageFetcher:
    """
    Fetches a share page with browser-like headers.

    One GET per call, no retries. Cookies are never kept between calls.
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        ssl_verify: Optional[bool] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        self.timeout_seconds = timeout if timeout is not None else config.request_timeout
        self.timeout = aiohttp.ClientTimeout(total=self.timeout_seconds)
        self.ssl_verify = config.ssl_verify if ssl_verify is None else ssl_verify
        self.extra_headers = headers
        self._session: Optional[aiohttp.ClientSession] = None
        self._lock = asyncio.Lock()

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create HTTP session."""
        async with self._lock:
            if self._session is None or self._session.closed:
                self._session = aiohttp.ClientSession(
                    timeout=self.timeout,
                    connector=create_connector(ssl_verify=self.ssl_verify),
                    cookie_jar=aiohttp.DummyCookieJar(),
                )
            return self._session

    async def close(self):
        """Close the HTTP session."""
        if self._session and not self._session.closed:
            await self._session.close()
            self._session = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def fetch(self, url: str) -> str:
        """
        Fetch a page and return its text.

        Args:
            url: Normalized share URL

        Returns:
            Response body as text

        Raises:
            FetchFailedError: On non-2xx status, network error or timeout
        """
        session = await self._get_session()
        headers = browser_headers(self.extra_headers)

        logger.debug(f"GET {url}")

        try:
            async with session.get(url, headers=headers, allow_redirects=True) as response:
                if not 200 <= response.status < 300:
                    raise FetchFailedError(f"Request failed with status code {response.status}")
                return await response.text(errors="replace")
        except asyncio.TimeoutError:
            raise FetchFailedError(f"timeout of {int(self.timeout_seconds * 1000)}ms exceeded")
        except aiohttp.ClientError as e:
            raise FetchFailedError(str(e) or e.__class__.__name__)
