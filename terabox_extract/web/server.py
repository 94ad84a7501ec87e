"""
aiohttp web server exposing the extraction endpoint.
"""
import logging
from typing import Optional

from aiohttp import web

from ..config import config
from ..extractor.fetcher import PageFetcher
from ..extractor.terabox import TeraboxExtractor
from .handlers import EXTRACTOR_KEY, setup_routes

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,HEAD",
}


@web.middleware
async def cors_preflight_middleware(request: web.Request, handler):
    """Answer CORS preflight requests before they reach a handler."""
    if request.method == "OPTIONS":
        return web.Response(status=204)
    return await handler(request)


async def add_cors_headers(request: web.Request, response: web.StreamResponse):
    """Allow any origin on every response, including errors."""
    response.headers.update(CORS_HEADERS)


class ExtractorServer:
    """HTTP server wrapping a :class:`TeraboxExtractor`."""

    def __init__(self, extractor: Optional[TeraboxExtractor] = None):
        self.extractor = extractor or TeraboxExtractor(
            fetcher=PageFetcher(timeout=config.request_timeout, ssl_verify=config.ssl_verify),
        )
        self.host = config.host
        self.port = config.port

    async def on_shutdown(self, app: web.Application):
        """Cleanup on shutdown."""
        logger.info("Shutting down...")
        await self.extractor.close()

    def create_app(self) -> web.Application:
        """Create the web application."""
        app = web.Application(middlewares=[cors_preflight_middleware])
        app[EXTRACTOR_KEY] = self.extractor

        setup_routes(app)

        app.on_response_prepare.append(add_cors_headers)
        app.on_shutdown.append(self.on_shutdown)

        return app

    def run(self):
        """Run the server until interrupted."""
        app = self.create_app()
        logger.info(f"Starting server on {self.host}:{self.port}")
        web.run_app(app, host=self.host, port=self.port, print=None)


def create_app(extractor: Optional[TeraboxExtractor] = None) -> web.Application:
    """Build an application around ``extractor`` (a default one if omitted)."""
    return ExtractorServer(extractor).create_app()
