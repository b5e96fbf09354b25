"""Tests for wishlist_extractor/common/url_utils.py"""

import pytest

from wishlist_extractor.common.url_utils import resolve_url

BASE = "https://shop.example/product/1"


class TestResolveUrl:
    def test_absolute_url_unchanged(self):
        assert resolve_url("http://other.example/a.jpg", BASE) == "http://other.example/a.jpg"

    def test_root_relative(self):
        assert resolve_url("/img/a.jpg", BASE) == "https://shop.example/img/a.jpg"

    def test_path_relative(self):
        assert resolve_url("a.jpg", BASE) == "https://shop.example/product/a.jpg"

    def test_parent_relative(self):
        assert resolve_url("../img/a.jpg", BASE) == "https://shop.example/img/a.jpg"

    def test_protocol_relative_takes_page_scheme(self):
        assert resolve_url("//cdn.example/a.jpg", BASE) == "https://cdn.example/a.jpg"

    def test_protocol_relative_on_http_page(self):
        assert resolve_url("//cdn.example/a.jpg", "http://shop.example/") == "http://cdn.example/a.jpg"

    def test_surrounding_whitespace_trimmed(self):
        assert resolve_url("  /img/a.jpg \n", BASE) == "https://shop.example/img/a.jpg"

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_blank_is_none(self, raw):
        assert resolve_url(raw, BASE) is None

    def test_non_http_scheme_is_none(self):
        assert resolve_url("javascript:void(0)", BASE) is None

    def test_relative_without_base_is_none(self):
        assert resolve_url("/img/a.jpg", "") is None

    def test_invalid_base_is_none(self):
        assert resolve_url("/a.jpg", "https://[::1/page") is None
