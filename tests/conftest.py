"""Shared fixtures for the extractor tests."""

import json
import random
from unittest.mock import AsyncMock

import pytest

from terabox_extract.extractor.fetcher import PageFetcher
from terabox_extract.extractor.links import LinkSynthesizer
from terabox_extract.extractor.terabox import TeraboxExtractor

SHARE_URL = "https://terabox.com/s/1AbcDefGh"


def make_page(data, variable="yunData") -> str:
    """Wrap page data in a minimal share page."""
    return (
        "<html><head><title>TeraBox</title></head><body>"
        f"<script>window.{variable} = {json.dumps(data)};</script>"
        "</body></html>"
    )


@pytest.fixture
def video_page_data():
    return {
        "file_list": [
            {
                "server_filename": "movie.mp4",
                "size": 1073741824,
                "fs_id": 12345,
                "category": 1,
            }
        ],
        "server": "s1",
        "sign": "xyz",
        "timestamp": "111",
    }


@pytest.fixture
def video_page(video_page_data):
    return make_page(video_page_data)


@pytest.fixture
def synthesizer():
    return LinkSynthesizer(rng=random.Random(1234))


@pytest.fixture
def stub_fetcher(video_page):
    fetcher = AsyncMock(spec=PageFetcher)
    fetcher.fetch.return_value = video_page
    return fetcher


@pytest.fixture
def extractor(stub_fetcher, synthesizer):
    return TeraboxExtractor(fetcher=stub_fetcher, synthesizer=synthesizer)
