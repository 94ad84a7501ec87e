"""
HTTP request handlers.
"""
import logging
from pathlib import Path

from aiohttp import web

from ..extractor.response import error_payload
from ..extractor.terabox import TeraboxExtractor

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"

EXTRACTOR_KEY = web.AppKey("extractor", TeraboxExtractor)


async def extract_handler(request: web.Request) -> web.Response:
    """Handle ``/api/extract?url=...``."""
    if request.method != "GET":
        return web.json_response(
            error_payload("Method not allowed"),
            status=405,
            headers={"Allow": "GET"},
        )

    url = request.query.get("url", "")
    if not url:
        return web.json_response(error_payload("Missing URL parameter"), status=400)

    extractor = request.app[EXTRACTOR_KEY]

    try:
        result = await extractor.extract(url)
    except Exception as e:
        logger.exception(f"Unexpected error extracting {url}: {e}")
        return web.json_response(
            error_payload(str(e) or "Internal server error"),
            status=500,
        )

    return web.json_response(result.to_payload(), status=200 if result.ok else 400)


async def index_handler(request: web.Request) -> web.FileResponse:
    """Serve the browser form."""
    return web.FileResponse(STATIC_DIR / "index.html")


async def health_handler(request: web.Request) -> web.Response:
    """Health check endpoint."""
    return web.json_response({
        "status": "ok",
        "service": "terabox-extract",
    })


def setup_routes(app: web.Application):
    """Register all routes."""
    app.router.add_get("/", index_handler)
    app.router.add_get("/health", health_handler)
    app.router.add_route("*", "/api/extract", extract_handler)
