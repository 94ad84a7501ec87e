"""HTTP service."""
from .server import ExtractorServer, create_app

__all__ = ["ExtractorServer", "create_app"]
