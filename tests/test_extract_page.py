"""Tests for extract_page.py and the get_page_info envelope."""

import json
import logging

import pytest

import extract_page
from wishlist_extractor.common.log_config import LOGGER_NAME
from wishlist_extractor.extraction import get_page_info


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


class TestGetPageInfo:
    def test_success_envelope(self, product_page_html):
        result = get_page_info(product_page_html, "https://shop.example/product/1")
        assert result["success"] is True
        assert result["data"]["price"] == 1234.56
        assert result["data"]["currency"] == "GBP"
        assert result["data"]["images"][0] == "https://shop.example/img/espresso-front.jpg"

    def test_result_is_json_serializable(self, amazon_page_html):
        result = get_page_info(amazon_page_html, "https://www.amazon.de/dp/B0TEST1234")
        assert json.loads(json.dumps(result)) == result

    def test_error_envelope(self, monkeypatch):
        def explode(html, url):
            raise RuntimeError("document unavailable")

        monkeypatch.setattr("wishlist_extractor.extraction.PageDocument.from_html", explode)
        result = get_page_info("<html></html>", "https://shop.example/")
        assert result == {"success": False, "error": "document unavailable"}


class TestMain:
    def test_writes_json(self, tmp_path, fixtures_dir, capsys):
        output = tmp_path / "out" / "result.json"
        code = extract_page.main([
            "--file", str(fixtures_dir / "product_page.html"),
            "--url", "https://shop.example/product/1",
            "--output-json", str(output),
            "--quiet",
        ])

        assert code == 0
        result = json.loads(output.read_text(encoding="utf-8"))
        assert result["success"] is True
        assert result["data"]["title"] == "Espresso Machine Pro"
        assert "EXTRACTION REPORT" in capsys.readouterr().out

    def test_missing_file(self, tmp_path, capsys):
        code = extract_page.main([
            "--file", str(tmp_path / "missing.html"),
            "--url", "https://shop.example/",
            "--quiet",
        ])

        assert code == 1
        out = capsys.readouterr().out
        assert '"success": false' in out

    @pytest.mark.parametrize("settings_text", [
        "extraction: [min_dimension: 100\n",
        "extraction:\n  min_dimension: abc\n",
    ])
    def test_invalid_config(self, tmp_path, capsys, settings_text):
        page = tmp_path / "page.html"
        page.write_text("<html><body><p>Nothing</p></body></html>", encoding="utf-8")
        config = tmp_path / "settings.yaml"
        config.write_text(settings_text, encoding="utf-8")

        code = extract_page.main([
            "--file", str(page),
            "--url", "https://shop.example/",
            "--config", str(config),
            "--quiet",
        ])

        assert code == 1
        out = capsys.readouterr().out
        assert '"success": false' in out
        assert "settings.yaml" in out

    def test_custom_config(self, tmp_path, capsys):
        page = tmp_path / "page.html"
        page.write_text("<html><body><p>Nothing</p></body></html>", encoding="utf-8")
        config = tmp_path / "settings.yaml"
        config.write_text("extraction:\n  default_currency: CHF\n", encoding="utf-8")

        code = extract_page.main([
            "--file", str(page),
            "--url", "https://shop.example/",
            "--config", str(config),
            "--verbose",
        ])

        assert code == 0
        out = capsys.readouterr().out
        assert '"currency": "CHF"' in out
        assert "[MISSING] Price" in out
