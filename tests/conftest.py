"""Shared test fixtures."""

from decimal import Decimal
from pathlib import Path

import pytest

from wishlist_extractor.extraction.document import PageDocument
from wishlist_extractor.models import ExtractedProduct

FIXTURES_DIR = Path(__file__).parent / "fixtures"

PRODUCT_URL = "https://shop.example/product/1"
AMAZON_URL = "https://www.amazon.de/dp/B0TEST1234"


@pytest.fixture
def fixtures_dir():
    """Return path to fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def product_page_html():
    """Load the generic shop product page fixture."""
    return (FIXTURES_DIR / "product_page.html").read_text(encoding="utf-8")


@pytest.fixture
def amazon_page_html():
    """Load the Amazon product page fixture."""
    return (FIXTURES_DIR / "amazon_product.html").read_text(encoding="utf-8")


@pytest.fixture
def product_document(product_page_html):
    return PageDocument.from_html(product_page_html, PRODUCT_URL)


@pytest.fixture
def amazon_document(amazon_page_html):
    return PageDocument.from_html(amazon_page_html, AMAZON_URL)


@pytest.fixture
def full_product():
    """Create a fully populated product."""
    return ExtractedProduct(
        url="https://shop.example/product/1",
        title="Espresso Machine Pro",
        description="Dual boiler espresso machine.",
        images=(
            "https://shop.example/img/front.jpg",
            "https://shop.example/img/side.jpg",
        ),
        price=Decimal("1234.56"),
        currency="EUR",
    )
