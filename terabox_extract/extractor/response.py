"""
Extraction results and their JSON representation.

Internally a result is tagged success or failure. The public JSON keeps the
established field labels, where clients tell the two apart by looking for
``Success`` in the ``status`` string.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .models import FileInfo

STATUS_KEY = "status"
INFO_KEY = "📋 Extracted Info"
TITLE_KEY = "📄 Title"
SIZE_KEY = "📦 Size"
DIRECT_LINK_KEY = "🔗 Direct Download Link"
THUMBNAILS_KEY = "🖼️ Thumbnails"
SHORT_LINK_KEY = "🔗 ShortLink"

SUCCESS_MARKER = "Success"
SUCCESS_STATUS = f"✅ {SUCCESS_MARKER}"
ERROR_PREFIX = "❌ Error: "


def is_success_status(status: str) -> bool:
    """Check a JSON ``status`` string for the success marker."""
    return SUCCESS_MARKER in (status or "")


def error_payload(message: str) -> Dict[str, Any]:
    return {STATUS_KEY: f"{ERROR_PREFIX}{message}"}


def success_payload(info: FileInfo, short_link: str) -> Dict[str, Any]:
    return {
        STATUS_KEY: SUCCESS_STATUS,
        INFO_KEY: [
            {
                TITLE_KEY: info.title,
                SIZE_KEY: info.size,
                DIRECT_LINK_KEY: info.direct_link,
                THUMBNAILS_KEY: info.thumbnails or {},
            }
        ],
        SHORT_LINK_KEY: short_link,
    }


@dataclass
class ExtractionResult:
    """Outcome of one extraction: either ``info`` + ``short_link`` or ``error``."""
    ok: bool
    info: Optional[FileInfo] = None
    short_link: Optional[str] = None
    error: Optional[str] = None
    error_kind: Optional[str] = None

    @classmethod
    def success(cls, info: FileInfo, short_link: str) -> "ExtractionResult":
        return cls(ok=True, info=info, short_link=short_link)

    @classmethod
    def failure(cls, message: str, kind: str = "ExtractionError") -> "ExtractionResult":
        return cls(ok=False, error=message, error_kind=kind)

    def to_payload(self) -> Dict[str, Any]:
        """Render the result in the public JSON shape."""
        if self.ok:
            return success_payload(self.info, self.short_link)
        return error_payload(self.error)
