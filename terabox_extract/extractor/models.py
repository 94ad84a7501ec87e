"""
Data holders for the extraction pipeline.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..utils.helpers import to_int

VIDEO_CATEGORY = 1
IMAGE_CATEGORY = 3


@dataclass(frozen=True)
class FileRecord:
    """First entry of the share's ``file_list``."""
    server_filename: str = "Unknown"
    size: int = 0
    fs_id: str = ""
    category: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FileRecord":
        fs_id = data.get("fs_id", "")
        return cls(
            server_filename=data.get("server_filename") or "Unknown",
            size=max(to_int(data.get("size", 0)), 0),
            fs_id="" if fs_id is None else str(fs_id),
            category=to_int(data.get("category", 0)),
        )

    @property
    def is_video(self) -> bool:
        return self.category == VIDEO_CATEGORY

    @property
    def is_image(self) -> bool:
        return self.category == IMAGE_CATEGORY


@dataclass(frozen=True)
class ShareContext:
    """Server, sign and timestamp values used to build links."""
    server: str = ""
    sign: str = ""
    timestamp: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ShareContext":
        def text(key: str) -> str:
            value = data.get(key)
            return str(value) if value else ""

        return cls(server=text("server"), sign=text("sign"), timestamp=text("timestamp"))


@dataclass
class FileInfo:
    """Extracted information for a shared file."""
    title: str
    size: str
    direct_link: str
    thumbnails: Optional[Dict[str, str]] = None
