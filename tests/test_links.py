"""Tests for download, thumbnail and short link construction."""

import random
from urllib.parse import parse_qs, urlparse

import pytest

from terabox_extract.extractor.links import THUMBNAIL_SIZES, LinkSynthesizer
from terabox_extract.extractor.models import FileRecord, ShareContext
from terabox_extract.extractor.normalizer import LinkNormalizer

CONTEXT = ShareContext(server="s1", sign="xyz", timestamp="111")


def record(category=1):
    return FileRecord(server_filename="movie.mp4", size=10, fs_id="12345", category=category)


class TestDirectLink:
    def test_layout(self):
        link = LinkSynthesizer(rng=random.Random(0)).direct_link(record(), CONTEXT)
        parsed = urlparse(link)
        params = parse_qs(parsed.query, keep_blank_values=True)

        assert parsed.scheme == "https"
        assert parsed.netloc == "d.1024tera.com"
        assert parsed.path == "/file/12345"
        assert params["dstime"] == ["111"]
        assert params["sign"] == ["xyz"]
        assert params["rt"] == ["sh"]
        assert params["expires"] == ["8h"]
        assert params["chkpc"] == [""]
        assert params["sh"] == ["1"]
        assert params["region"] == ["jp"]

    def test_fid_random_ranges(self):
        synthesizer = LinkSynthesizer(rng=random.Random(99))
        for _ in range(50):
            params = parse_qs(urlparse(synthesizer.direct_link(record(), CONTEXT)).query)
            fs_id, small, large = params["fid"][0].split("-")
            assert fs_id == "12345"
            assert 0 <= int(small) <= 9999
            assert 0 <= int(large) <= 9_999_999_999
            assert 0 <= int(params["dp-logid"][0]) < 10 ** 14
            assert 0 <= int(params["r"][0]) < 10 ** 9

    def test_deterministic_with_seeded_rng(self):
        first = LinkSynthesizer(rng=random.Random(42)).direct_link(record(), CONTEXT)
        second = LinkSynthesizer(rng=random.Random(42)).direct_link(record(), CONTEXT)
        assert first == second

    def test_empty_context(self):
        link = LinkSynthesizer(rng=random.Random(0)).direct_link(record(), ShareContext())
        assert "&dstime=&" in link
        assert "&sign=&" in link

    def test_custom_host(self):
        synthesizer = LinkSynthesizer(rng=random.Random(0), download_host="dl.example")
        assert synthesizer.direct_link(record(), CONTEXT).startswith("https://dl.example/file/12345?")


class TestThumbnails:
    @pytest.mark.parametrize("category, file_type", [(1, "video"), (3, "image")])
    def test_four_presets(self, category, file_type):
        thumbs = LinkSynthesizer(rng=random.Random(0)).thumbnails(record(category), CONTEXT)

        assert list(thumbs) == ["140x90", "360x270", "60x60", "850x580"]
        for (width, height), url in zip(THUMBNAIL_SIZES, thumbs.values()):
            parsed = urlparse(url)
            params = parse_qs(parsed.query, keep_blank_values=True)
            assert parsed.netloc == "data.1024tera.com"
            assert parsed.path == "/thumbnail/12345"
            assert params["size"] == [f"c{width}_u{height}"]
            assert params["ft"] == [file_type]
            assert params["time"] == ["111"]
            assert params["quality"] == ["100"]
            assert params["vuk"] == ["-"]
            assert "dstime" not in params

    def test_variants_share_query(self):
        thumbs = LinkSynthesizer(rng=random.Random(5)).thumbnails(record(), CONTEXT)
        prefixes = {url.split("&size=")[0] for url in thumbs.values()}
        assert len(prefixes) == 1

    @pytest.mark.parametrize("category", [0, 2, 4, 6])
    def test_other_categories_absent(self, category):
        assert LinkSynthesizer().thumbnails(record(category), CONTEXT) is None


class TestShortLink:
    def test_template(self):
        assert LinkNormalizer().build_short_link("1AbcDefGh") == "https://1024terabox.com/s/1AbcDefGh"

    def test_custom_host(self):
        assert LinkNormalizer(host="terabox.com").build_short_link("x") == "https://terabox.com/s/x"

    def test_empty_identifier(self):
        with pytest.raises(ValueError):
            LinkNormalizer().build_short_link("")
