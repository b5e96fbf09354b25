"""
Currency Resolution

Determines the ISO 4217 code for the page price. Order: retailer profile
(storefront domain, price symbol), itemprop="priceCurrency", price currency
meta tags, JSON-LD offers, then the configured default.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from ..common.config_loader import DEFAULT_SETTINGS, ExtractionSettings
from .document import PageDocument, element_text
from .parsers.structured_data import find_field, json_ld_payloads
from .sites import GENERIC_PROFILE, SiteProfile, run_strategy

logger = logging.getLogger(__name__)

CURRENCY_META_NAMES = ('product:price:currency', 'og:price:currency')

_CURRENCY_CODE = re.compile(r'^[A-Z]{3}$')


def normalize_currency(value) -> Optional[str]:
    """Uppercased 3-letter code, or None for anything else."""
    if not isinstance(value, str):
        return None
    code = value.strip().upper()
    return code if _CURRENCY_CODE.match(code) else None


def resolve_currency(
    document: PageDocument,
    profile: SiteProfile = GENERIC_PROFILE,
    settings: ExtractionSettings = DEFAULT_SETTINGS,
    payloads: Optional[List] = None,
) -> str:
    """
    Resolve the currency of the page.

    Args:
        document: Page snapshot
        profile: Site profile of the page
        settings: Supplies the default currency
        payloads: Already decoded JSON-LD payloads (decoded here if None)

    Returns:
        3-letter currency code, never empty
    """
    currency = normalize_currency(run_strategy(profile, 'extract_currency', document))
    if currency:
        return currency

    element = document.select_one('[itemprop="priceCurrency"]')
    if element is not None:
        currency = normalize_currency(element.get('content') or element_text(element))
        if currency:
            return currency

    for name in CURRENCY_META_NAMES:
        currency = normalize_currency(document.meta_value(name))
        if currency:
            return currency

    if payloads is None:
        payloads = json_ld_payloads(document.json_ld_scripts())
    for payload in payloads:
        currency = normalize_currency(find_field(payload, 'priceCurrency'))
        if currency:
            return currency

    logger.debug("No currency found, using %s", settings.default_currency)
    return settings.default_currency
