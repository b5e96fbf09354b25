"""Tests for wishlist_extractor/extraction/currency.py"""

from wishlist_extractor.common.config_loader import ExtractionSettings
from wishlist_extractor.extraction.currency import normalize_currency, resolve_currency
from wishlist_extractor.extraction.document import PageDocument
from wishlist_extractor.extraction.sites import SiteProfile


def make_document(body: str = "", head: str = "") -> PageDocument:
    return PageDocument.from_html(
        f"<html><head>{head}</head><body>{body}</body></html>",
        "https://shop.example/product/1",
    )


def json_ld(payload: str) -> str:
    return f'<script type="application/ld+json">{payload}</script>'


class FixedCurrencyProfile(SiteProfile):
    name = "fixed"

    def extract_currency(self, document):
        return "JPY"


class TestNormalizeCurrency:
    def test_uppercases(self):
        assert normalize_currency(" usd ") == "USD"

    def test_rejects_non_codes(self):
        assert normalize_currency("€") is None
        assert normalize_currency("EURO") is None
        assert normalize_currency("") is None
        assert normalize_currency(None) is None
        assert normalize_currency(978) is None


class TestResolveCurrency:
    def test_retailer_profile_first(self):
        document = make_document('<meta itemprop="priceCurrency" content="USD">')
        assert resolve_currency(document, FixedCurrencyProfile()) == "JPY"

    def test_itemprop_content(self):
        document = make_document('<span itemprop="priceCurrency" content="CHF">Fr.</span>')
        assert resolve_currency(document) == "CHF"

    def test_itemprop_text(self):
        document = make_document('<span itemprop="priceCurrency">sek</span>')
        assert resolve_currency(document) == "SEK"

    def test_itemprop_before_meta(self):
        document = make_document(
            '<span itemprop="priceCurrency" content="CHF"></span>',
            head='<meta property="product:price:currency" content="USD">',
        )
        assert resolve_currency(document) == "CHF"

    def test_meta_tags(self):
        document = make_document(head='<meta property="og:price:currency" content="GBP">')
        assert resolve_currency(document) == "GBP"

    def test_meta_before_json_ld(self):
        document = make_document(head=(
            '<meta property="product:price:currency" content="USD">'
            + json_ld('{"offers": {"priceCurrency": "GBP"}}')
        ))
        assert resolve_currency(document) == "USD"

    def test_json_ld_nested_offers(self):
        document = make_document(head=json_ld('[{"offers":[{"price":"19.99","priceCurrency":"USD"}]}]'))
        assert resolve_currency(document) == "USD"

    def test_json_ld_after_malformed_script(self):
        document = make_document(head=json_ld("{oops") + json_ld('{"offers": {"priceCurrency": "PLN"}}'))
        assert resolve_currency(document) == "PLN"

    def test_invalid_symbol_falls_through(self):
        document = make_document(
            '<span itemprop="priceCurrency">€</span>',
            head='<meta property="product:price:currency" content="EUR">',
        )
        assert resolve_currency(document) == "EUR"

    def test_default_when_nothing_found(self):
        assert resolve_currency(make_document("<p>No price</p>")) == "EUR"

    def test_configured_default(self):
        settings = ExtractionSettings(default_currency="USD")
        assert resolve_currency(make_document(), settings=settings) == "USD"
