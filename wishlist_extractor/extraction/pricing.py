"""
Price Cascade

Finds the product price, first success wins:

1. Retailer profile price strategy
2. itemprop="price" (content attribute, then text)
3. JSON-LD offers, script by script
4. Price amount meta tags
5. Heuristic price selectors
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import List, Optional, Tuple

from ..common.config_loader import DEFAULT_SETTINGS, ExtractionSettings
from ..models import PriceSource
from .document import PageDocument, element_text
from .parsers.price_parser import normalize_price
from .parsers.structured_data import find_field, json_ld_payloads
from .sites import GENERIC_PROFILE, SiteProfile, run_strategy

logger = logging.getLogger(__name__)

PRICE_META_NAMES = ('product:price:amount', 'og:price:amount')

PriceMatch = Tuple[Optional[Decimal], Optional[PriceSource]]


def get_price(
    document: PageDocument,
    profile: SiteProfile = GENERIC_PROFILE,
    settings: ExtractionSettings = DEFAULT_SETTINGS,
    payloads: Optional[List] = None,
) -> Optional[Decimal]:
    """
    Extract the product price.

    Args:
        document: Page snapshot
        profile: Site profile of the page
        settings: Supplies the heuristic price selectors
        payloads: Already decoded JSON-LD payloads (decoded here if None)

    Returns:
        Price as Decimal, or None when no source has one
    """
    price, source = find_price(document, profile, settings, payloads)
    if source is not None:
        logger.debug("Price %s from %s", price, source.value)
    return price


def find_price(
    document: PageDocument,
    profile: SiteProfile = GENERIC_PROFILE,
    settings: ExtractionSettings = DEFAULT_SETTINGS,
    payloads: Optional[List] = None,
) -> PriceMatch:
    """Run the cascade and report which tier produced the price."""
    price = run_strategy(profile, 'extract_price', document)
    if price is not None:
        return price, PriceSource.RETAILER_OVERRIDE

    element = document.select_one('[itemprop="price"]')
    if element is not None:
        price = normalize_price(element.get('content'))
        if price is not None:
            return price, PriceSource.SCHEMA_CONTENT_ATTRIBUTE
        price = normalize_price(element_text(element))
        if price is not None:
            return price, PriceSource.SCHEMA_TEXT

    if payloads is None:
        payloads = json_ld_payloads(document.json_ld_scripts())
    for payload in payloads:
        price = _json_ld_price(find_field(payload, 'price'))
        if price is not None:
            return price, PriceSource.JSON_LD

    for name in PRICE_META_NAMES:
        price = normalize_price(document.meta_value(name))
        if price is not None:
            return price, PriceSource.META_TAG

    for selector in settings.price_selectors:
        element = document.select_one(selector)
        if element is not None:
            price = normalize_price(element_text(element))
            if price is not None:
                return price, PriceSource.HEURISTIC_SELECTOR

    return None, None


def _json_ld_price(value) -> Optional[Decimal]:
    # Booleans and nested objects are not prices
    if value is None or isinstance(value, (bool, dict, list)):
        return None
    return normalize_price(str(value))
