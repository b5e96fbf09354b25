"""
Wishlist Product Metadata Extractor

Extracts product metadata (URL, title, description, images, price, currency)
from a loaded web page so it can be added to a wishlist.

Modules:
    models      - Data models (ExtractedProduct, ImageCandidate, PriceSource)
    common      - Shared utilities (text cleanup, URL resolution, config, logging)
    extraction  - Extraction cascades, parsers and retailer site profiles
"""

from .extraction import extract_product, get_page_info
from .extraction.document import PageDocument, PageLocation
from .models import ExtractedProduct

__all__ = [
    'extract_product',
    'get_page_info',
    'PageDocument',
    'PageLocation',
    'ExtractedProduct',
]
