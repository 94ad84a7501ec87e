"""
Share page parsing.

Pulls the share identifier and the embedded ``window.<variable> = {...};``
data blob out of the page HTML.
"""
import json
import re
from typing import Any, Dict, Optional, Tuple
import logging

from ..config import config
from ..domains.resolver import DomainResolver
from ..exceptions import (
    EmptyFileListError,
    IdentifierNotFoundError,
    PageDataInvalidError,
    PageDataNotFoundError,
)
from ..utils.helpers import format_size
from .links import LinkSynthesizer
from .models import FileInfo, FileRecord, ShareContext

logger = logging.getLogger(__name__)

# Page text fallbacks, tried in order after the URL path
PAGE_ID_PATTERNS = [
    re.compile(r'"fs_id"\s*:\s*(\d+)'),
    re.compile(r'"shareid"\s*:\s*(\d+)'),
]

_decoder = json.JSONDecoder()


def extract_identifier(url: str, html: Optional[str] = None) -> str:
    """
    Find the share identifier for a page.

    The ``/s/<token>`` path segment wins over anything in the page text;
    after that ``fs_id`` is preferred to ``shareid``.

    Raises:
        IdentifierNotFoundError: If neither the URL nor the page yields one
    """
    surl = DomainResolver.extract_surl(url)
    if surl:
        return surl

    if html:
        for pattern in PAGE_ID_PATTERNS:
            match = pattern.search(html)
            if match:
                return match.group(1)

    raise IdentifierNotFoundError()


def find_page_data(html: str, variable: Optional[str] = None) -> Dict[str, Any]:
    """
    Locate and decode the embedded page data object.

    Args:
        html: Share page HTML
        variable: Name of the ``window`` property holding the data

    Returns:
        Decoded JSON object

    Raises:
        PageDataNotFoundError: If the assignment is absent
        PageDataInvalidError: If the assigned value is not a JSON object
    """
    variable = variable or config.page_data_variable
    pattern = re.compile(r"window\.%s\s*=\s*" % re.escape(variable))

    match = pattern.search(html or "")
    if not match:
        raise PageDataNotFoundError()

    try:
        data, _ = _decoder.raw_decode(html, match.end())
    except (ValueError, RecursionError) as e:
        logger.debug(f"Failed to decode window.{variable}: {e}")
        raise PageDataInvalidError()

    if not isinstance(data, dict):
        raise PageDataInvalidError()

    return data


def parse_page_data(html: str, variable: Optional[str] = None) -> Tuple[FileRecord, ShareContext]:
    """Decode the page data and return the first file with its link context."""
    data = find_page_data(html, variable)

    file_list = data.get("file_list") or []
    if not isinstance(file_list, list) or not file_list:
        raise EmptyFileListError()

    first = file_list[0]
    if not isinstance(first, dict):
        raise PageDataInvalidError()

    return FileRecord.from_dict(first), ShareContext.from_dict(data)


def build_file_info(
    record: FileRecord,
    context: ShareContext,
    synthesizer: LinkSynthesizer,
) -> FileInfo:
    """Combine a file record and its link context into a :class:`FileInfo`."""
    return FileInfo(
        title=record.server_filename,
        size=format_size(record.size),
        direct_link=synthesizer.direct_link(record, context),
        thumbnails=synthesizer.thumbnails(record, context),
    )
