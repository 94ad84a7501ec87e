"""
Configuration management for the Terabox extractor service.
"""
import os
from dataclasses import dataclass, field
from typing import List
from dotenv import load_dotenv

load_dotenv()


DEFAULT_ALLOWED_HOSTS = "terabox.com,1024tera.com,teraboxapp.com,4funbox.com,1024terabox.com"


def _split_hosts(value: str) -> List[str]:
    return [host.strip().lower() for host in value.split(",") if host.strip()]


@dataclass
class Config:
    """Application configuration."""

    # HTTP server
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Outbound fetch
    request_timeout: float = float(os.getenv("REQUEST_TIMEOUT", "10"))
    ssl_verify: bool = os.getenv("SSL_VERIFY", "true").lower() in ("1", "true", "yes")

    # Remote service layout
    allowed_hosts: List[str] = field(
        default_factory=lambda: _split_hosts(os.getenv("ALLOWED_HOSTS", DEFAULT_ALLOWED_HOSTS))
    )
    page_data_variable: str = os.getenv("PAGE_DATA_VARIABLE", "yunData")
    short_link_host: str = os.getenv("SHORT_LINK_HOST", "1024terabox.com")
    download_host: str = os.getenv("DOWNLOAD_HOST", "d.1024tera.com")
    thumbnail_host: str = os.getenv("THUMBNAIL_HOST", "data.1024tera.com")

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    def validate(self) -> bool:
        """Validate configuration values."""
        if not 0 < self.port < 65536:
            raise ValueError(f"PORT must be between 1 and 65535, got {self.port}")
        if self.request_timeout <= 0:
            raise ValueError("REQUEST_TIMEOUT must be positive")
        if not self.allowed_hosts:
            raise ValueError("ALLOWED_HOSTS must name at least one host")
        if not self.page_data_variable:
            raise ValueError("PAGE_DATA_VARIABLE is required")
        return True


config = Config()
