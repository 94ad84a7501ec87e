"""
Download and thumbnail link construction.

These links mimic the layout of Terabox's signed URLs. The ``fid`` suffix,
log id and request id are random, so the remote service may refuse them;
they are a best-effort guess, not a reimplementation of its signing.
"""
import random
from typing import Dict, List, Optional, Tuple

from ..config import config
from .models import FileRecord, ShareContext

# (width, height) presets, in output order
THUMBNAIL_SIZES: List[Tuple[int, int]] = [(140, 90), (360, 270), (60, 60), (850, 580)]


class LinkSynthesizer:
    """Builds direct-download and thumbnail URLs for a file record."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        download_host: Optional[str] = None,
        thumbnail_host: Optional[str] = None,
    ):
        self.rng = rng or random.Random()
        self.download_host = download_host or config.download_host
        self.thumbnail_host = thumbnail_host or config.thumbnail_host

    def _signed_params(self, record: FileRecord, context: ShareContext, time_key: str) -> str:
        fid = f"{record.fs_id}-{self.rng.randrange(10_000)}-{self.rng.randrange(10_000_000_000)}"
        logid = self.rng.randrange(100_000_000_000_000)
        return (
            f"fid={fid}&{time_key}={context.timestamp}&rt=sh&sign={context.sign}"
            f"&expires=8h&chkv=0&chkbd=0&chkpc=&dp-logid={logid}&dp-callid=0"
        )

    def direct_link(self, record: FileRecord, context: ShareContext) -> str:
        """Build the direct download URL."""
        params = self._signed_params(record, context, "dstime")
        request_id = self.rng.randrange(1_000_000_000)
        return (
            f"https://{self.download_host}/file/{record.fs_id}"
            f"?{params}&r={request_id}&sh=1&region=jp"
        )

    def thumbnails(self, record: FileRecord, context: ShareContext) -> Optional[Dict[str, str]]:
        """
        Build thumbnail URLs for every size preset.

        Returns None for anything other than videos and images.
        """
        if not (record.is_video or record.is_image):
            return None

        file_type = "video" if record.is_video else "image"
        base = f"https://{self.thumbnail_host}/thumbnail/{record.fs_id}"
        params = self._signed_params(record, context, "time")

        return {
            f"{width}x{height}": (
                f"{base}?{params}&size=c{width}_u{height}&quality=100&vuk=-&ft={file_type}"
            )
            for width, height in THUMBNAIL_SIZES
        }
