"""
Metadata Extractor

Composes the extraction steps into one ExtractedProduct for a page:
URL, title, description, images, price, currency.

Each step is guarded: an unexpected failure in one step is logged and
treated as "nothing found", so extraction always returns a product.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, TypeVar

from ..common.config_loader import DEFAULT_SETTINGS, ExtractionSettings
from ..common.text_utils import clean_string
from ..common.url_utils import resolve_url
from ..models import ExtractedProduct
from .currency import resolve_currency
from .document import PageDocument, element_text
from .images import select_images
from .parsers.structured_data import json_ld_payloads
from .pricing import get_price
from .sites import GENERIC_PROFILE, get_profile_for_location

logger = logging.getLogger(__name__)

T = TypeVar("T")


def extract_product(
    document: PageDocument,
    settings: ExtractionSettings = DEFAULT_SETTINGS,
) -> ExtractedProduct:
    """
    Extract product metadata from a page snapshot.

    Args:
        document: Page snapshot (never modified)
        settings: Extraction thresholds

    Returns:
        ExtractedProduct; missing fields are empty, price None, currency
        the default
    """
    profile = _guarded(
        "site profile", lambda: get_profile_for_location(document.location), GENERIC_PROFILE
    )

    payloads = _guarded("JSON-LD", lambda: json_ld_payloads(document.json_ld_scripts()), [])

    return ExtractedProduct(
        url=_guarded("url", lambda: extract_url(document), "") or document.location.href,
        title=_guarded("title", lambda: extract_title(document), ""),
        description=_guarded("description", lambda: extract_description(document), ""),
        images=tuple(_guarded("images", lambda: select_images(document, profile, settings), [])),
        price=_guarded("price", lambda: get_price(document, profile, settings, payloads), None),
        currency=_guarded(
            "currency",
            lambda: resolve_currency(document, profile, settings, payloads),
            settings.default_currency,
        ),
    )


def extract_url(document: PageDocument) -> str:
    """Canonical link, then og:url, then the page URL."""
    base_href = document.location.href

    canonical = resolve_url(document.canonical_href(), base_href)
    if canonical:
        return canonical

    og_url = resolve_url(document.meta_value('og:url'), base_href)
    if og_url:
        return og_url

    return base_href


def extract_title(document: PageDocument) -> str:
    """
    Extract the product title.

    Tries og:title, itemprop="name", the first h1 and the document title;
    the first non-empty one wins.
    """
    candidates = (
        lambda: document.meta_value('og:title'),
        lambda: element_text(document.select_one('[itemprop="name"]')),
        lambda: element_text(document.select_one('h1')),
        document.title_text,
    )
    return _first_clean(candidates)


def extract_description(document: PageDocument) -> str:
    """og:description, description meta, itemprop="description", else empty."""
    candidates = (
        lambda: document.meta_value('og:description'),
        lambda: document.meta_value('description'),
        lambda: element_text(document.select_one('[itemprop="description"]')),
    )
    return _first_clean(candidates)


def _first_clean(candidates) -> str:
    for candidate in candidates:
        text = clean_string(candidate())
        if text:
            return text
    return ""


def _guarded(step: str, func: Callable[[], T], default: Optional[T]) -> T:
    try:
        return func()
    except Exception:
        logger.warning("Extraction step %r failed, treating as no result", step, exc_info=True)
        return default
