"""Tests for the HTTP endpoint."""

import pytest

from terabox_extract.extractor.response import INFO_KEY, SHORT_LINK_KEY
from terabox_extract.web.server import create_app

from .conftest import SHARE_URL


@pytest.fixture
async def client(aiohttp_client, extractor):
    return await aiohttp_client(create_app(extractor))


async def test_extract_success(client):
    response = await client.get("/api/extract", params={"url": SHARE_URL})

    assert response.status == 200
    body = await response.json()
    assert body["status"] == "✅ Success"
    assert body[INFO_KEY][0]["📄 Title"] == "movie.mp4"
    assert body[SHORT_LINK_KEY] == "https://1024terabox.com/s/1AbcDefGh"


async def test_missing_url_parameter(client, stub_fetcher):
    response = await client.get("/api/extract")

    assert response.status == 400
    assert await response.json() == {"status": "❌ Error: Missing URL parameter"}
    stub_fetcher.fetch.assert_not_awaited()


async def test_empty_url_parameter(client):
    response = await client.get("/api/extract?url=")

    assert response.status == 400
    assert await response.json() == {"status": "❌ Error: Missing URL parameter"}


@pytest.mark.parametrize("method", ["POST", "PUT", "DELETE", "PATCH"])
async def test_non_get_rejected(client, method):
    response = await client.request(method, "/api/extract", params={"url": SHARE_URL})

    assert response.status == 405
    assert response.headers["Allow"] == "GET"
    assert await response.json() == {"status": "❌ Error: Method not allowed"}


async def test_extraction_failure_is_400(client):
    response = await client.get("/api/extract", params={"url": "https://example.com/s/x"})

    assert response.status == 400
    assert await response.json() == {"status": "❌ Error: Invalid TeraBox URL"}


async def test_unexpected_error_is_500(client, stub_fetcher):
    stub_fetcher.fetch.side_effect = RuntimeError("boom")

    response = await client.get("/api/extract", params={"url": SHARE_URL})

    assert response.status == 500
    assert await response.json() == {"status": "❌ Error: boom"}


async def test_cors_headers(client):
    response = await client.get("/api/extract", params={"url": SHARE_URL})

    assert response.headers["Access-Control-Allow-Origin"] == "*"
    assert response.headers["Access-Control-Allow-Methods"] == "GET,HEAD"


async def test_cors_preflight(client):
    response = await client.options("/api/extract")

    assert response.status == 204
    assert response.headers["Access-Control-Allow-Origin"] == "*"


async def test_index_serves_form(client):
    response = await client.get("/")

    assert response.status == 200
    text = await response.text()
    assert "/api/extract?url=" in text


async def test_health(client):
    response = await client.get("/health")

    assert await response.json() == {"status": "ok", "service": "terabox-extract"}


@pytest.mark.parametrize("html", [
    "<script>window.yunData = " + "[" * 100000 + "]" * 100000 + ";</script>",
    "<script>window.yunData = {file_list: [}];</script>",
])
async def test_undecodable_page_data_is_400(client, stub_fetcher, html):
    stub_fetcher.fetch.return_value = html

    response = await client.get("/api/extract", params={"url": SHARE_URL})

    assert response.status == 400
    assert await response.json() == {
        "status": "❌ Error: Could not extract file info: page data is not valid JSON"
    }


@pytest.mark.parametrize("size, expected", [
    ("1e400", "0 Bytes"),
    ("Infinity", "0 Bytes"),
    ("1" + "0" * 400, None),
])
async def test_extreme_sizes_still_succeed(client, stub_fetcher, size, expected):
    stub_fetcher.fetch.return_value = (
        '<script>window.yunData = {"file_list":[{"server_filename":"big.bin",'
        '"size":%s,"fs_id":7,"category":%s}]};</script>' % (size, size)
    )

    response = await client.get("/api/extract", params={"url": SHARE_URL})

    assert response.status == 200
    info = (await response.json())[INFO_KEY][0]
    if expected:
        assert info["📦 Size"] == expected
    else:
        assert info["📦 Size"].endswith(" TB")
    assert info["🖼️ Thumbnails"] == {}
