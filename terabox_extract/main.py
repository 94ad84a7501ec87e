#!/usr/bin/env python3
"""
Terabox Extractor API - Main Entry Point
"""
import logging
import sys

from .config import config
from .web.server import ExtractorServer


def setup_logging():
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger("aiohttp.access").setLevel(logging.WARNING)


def main():
    """Main entry point."""
    setup_logging()
    logger = logging.getLogger(__name__)

    logger.info("=" * 50)
    logger.info("Starting Terabox Extractor API")
    logger.info("=" * 50)

    try:
        config.validate()
    except ValueError as e:
        logger.error(f"Config error: {e}")
        sys.exit(1)

    logger.info(f"Allowed hosts: {', '.join(config.allowed_hosts)}")
    logger.info(f"Request timeout: {config.request_timeout}s")

    server = ExtractorServer()

    try:
        server.run()
    except KeyboardInterrupt:
        logger.info("Server stopped")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
