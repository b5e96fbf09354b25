"""
Product metadata extraction.

Modules:
    document - PageDocument / PageLocation read-only page snapshot
    metadata_extractor - extract_product, the top-level cascade
    images - Image candidate selection
    pricing - Price cascade
    currency - Currency resolution
    parsers - JSON-LD and price string parsers
    sites - Retailer site profiles (Amazon) and the profile registry
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from ..common.config_loader import DEFAULT_SETTINGS, ExtractionSettings
from .currency import resolve_currency
from .document import PageDocument, PageLocation
from .images import select_images
from .metadata_extractor import extract_description, extract_product, extract_title, extract_url
from .parsers import find_field, normalize_price, normalize_retailer_price
from .pricing import get_price
from .sites import SITE_PROFILES, get_profile_for_location

logger = logging.getLogger(__name__)


def get_page_info(html: str, url: str, settings: ExtractionSettings = DEFAULT_SETTINGS) -> Dict[str, Any]:
    """
    Extract a page and wrap the result in a reply envelope.

    Args:
        html: Page HTML as loaded by the caller
        url: URL the page was loaded from

    Returns:
        {"success": True, "data": {...}} or {"success": False, "error": "..."}
    """
    try:
        document = PageDocument.from_html(html, url)
        product = extract_product(document, settings)
    except Exception as e:
        logger.error("Could not read page %s: %s", url, e)
        return {"success": False, "error": str(e)}

    return {"success": True, "data": product.to_dict()}


__all__ = [
    'PageDocument',
    'PageLocation',
    'extract_product',
    'extract_url',
    'extract_title',
    'extract_description',
    'select_images',
    'get_price',
    'resolve_currency',
    'find_field',
    'normalize_price',
    'normalize_retailer_price',
    'get_page_info',
    'SITE_PROFILES',
    'get_profile_for_location',
]
