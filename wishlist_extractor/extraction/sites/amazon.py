"""
Amazon Site Profile

Amazon pages are full of related-product images and secondary prices, so
the generic cascades pick the wrong ones. This profile reads the product
viewer, the price widget and the storefront domain instead.
"""

from __future__ import annotations

import logging
import re
from decimal import Decimal
from types import MappingProxyType
from typing import List, Optional

from ...common.config_loader import DEFAULT_SETTINGS, ExtractionSettings
from ...common.url_utils import resolve_url
from ..document import PageDocument, PageLocation, element_text
from ..parsers.price_parser import normalize_retailer_price
from ..parsers.structured_data import parse_json
from .base import SiteProfile

logger = logging.getLogger(__name__)

# Storefront domain -> currency
DOMAIN_CURRENCIES = MappingProxyType({
    'amazon.com': 'USD',
    'amazon.co.uk': 'GBP',
    'amazon.de': 'EUR',
    'amazon.fr': 'EUR',
    'amazon.it': 'EUR',
    'amazon.es': 'EUR',
    'amazon.nl': 'EUR',
    'amazon.be': 'EUR',
    'amazon.ca': 'CAD',
    'amazon.com.au': 'AUD',
    'amazon.co.jp': 'JPY',
    'amazon.cn': 'CNY',
    'amazon.in': 'INR',
    'amazon.com.br': 'BRL',
    'amazon.com.mx': 'MXN',
    'amazon.pl': 'PLN',
    'amazon.se': 'SEK',
    'amazon.sg': 'SGD',
    'amazon.ae': 'AED',
    'amazon.sa': 'SAR',
    'amazon.com.tr': 'TRY',
})

# Longest first so amazon.com.au is not taken for amazon.com
_DOMAINS_BY_LENGTH = tuple(sorted(DOMAIN_CURRENCIES, key=len, reverse=True))

CURRENCY_SYMBOLS = (
    ('$', 'USD'),
    ('£', 'GBP'),
    ('€', 'EUR'),
    ('¥', 'JPY'),
)

# Accessible (screen-reader) prices, most specific widget first
OFFSCREEN_PRICE_SELECTORS = (
    '#corePrice_feature_div .a-offscreen',
    '#corePriceDisplay_desktop_feature_div .a-offscreen',
    '.a-price[data-a-size="xl"] .a-offscreen',
    '.a-price[data-a-size="l"] .a-offscreen',
    '#priceblock_ourprice',
    '#priceblock_dealprice',
    '#priceblock_saleprice',
    '.a-price .a-offscreen',
)

DISPLAYED_PRICE_SELECTORS = (
    'input[name="displayedPrice"]',
    '#priceValue',
    '[data-a-price]',
)

PRICE_SYMBOL_SELECTOR = '.a-price-symbol, #priceblock_ourprice, #corePrice_feature_div .a-offscreen'
VIEWER_IMAGE_SELECTOR = '#landingImage, #imgBlkFront, #ebooksImgBlkFront'
GALLERY_SELECTOR = '#altImages, #imageBlock_feature_div'
GALLERY_THUMBNAIL_SELECTOR = 'img[src*="/images/I/"]'
VIDEO_THUMBNAIL_MARKER = '_play-button'

# Size-code segments in image URLs (e.g. "._AC_US40_.") -> high resolution
HIGH_RES_TOKEN = '._AC_SL1500_.'
HIGH_RES_PATTERNS = (
    re.compile(r'\._[A-Z]{2}_[A-Z]{2}\d+_\.'),
    re.compile(r'\._[A-Z]{2}\d+_\.'),
    re.compile(r'\._S[XY]\d+_\.'),
)


def high_resolution_url(url: Optional[str]) -> Optional[str]:
    """Rewrite the size code of an Amazon image URL to the high-resolution one."""
    if not url:
        return None
    for pattern in HIGH_RES_PATTERNS:
        url = pattern.sub(HIGH_RES_TOKEN, url, count=1)
    return url


def currency_for_hostname(hostname: str) -> Optional[str]:
    """
    Look up the currency of an Amazon storefront.

    Args:
        hostname: Page hostname (e.g. "www.amazon.co.uk")

    Returns:
        ISO currency code, or None for an unknown storefront
    """
    hostname = (hostname or "").lower()
    for domain in _DOMAINS_BY_LENGTH:
        if hostname == domain or hostname.endswith('.' + domain):
            return DOMAIN_CURRENCIES[domain]
    return None


def is_us_storefront(hostname: str) -> bool:
    hostname = (hostname or "").lower()
    return 'amazon.com' in hostname and '.com.' not in hostname


class AmazonProfile(SiteProfile):
    """Amazon storefronts (amazon.com, amazon.de, amazon.co.jp, ...)."""

    name = "amazon"

    def matches(self, location: PageLocation) -> bool:
        return 'amazon.' in location.hostname

    def extract_images(
        self,
        document: PageDocument,
        settings: ExtractionSettings = DEFAULT_SETTINGS,
    ) -> List[str]:
        """
        Extract the product images from the image viewer.

        Order: viewer image, gallery thumbnails (upgraded to high resolution,
        video thumbnails skipped), then og:image when nothing else is found.

        Returns:
            Unique absolute URLs, at most settings.max_retailer_images
        """
        images = []
        seen_urls = set()
        base_href = document.location.href

        def add(url: Optional[str]) -> None:
            resolved = resolve_url(url, base_href)
            if resolved and resolved not in seen_urls:
                seen_urls.add(resolved)
                images.append(resolved)

        add(self._viewer_image(document))

        gallery = document.select_one(GALLERY_SELECTOR)
        if gallery is not None:
            for thumb in gallery.select(GALLERY_THUMBNAIL_SELECTOR):
                if len(images) >= settings.max_retailer_images:
                    break
                url = high_resolution_url(thumb.get('src'))
                if url and VIDEO_THUMBNAIL_MARKER in url:
                    continue
                add(url)

        if not images:
            add(high_resolution_url(document.meta_value('og:image')))

        return images[:settings.max_retailer_images]

    def _viewer_image(self, document: PageDocument) -> Optional[str]:
        viewer = document.select_one(VIEWER_IMAGE_SELECTOR)
        if viewer is None:
            return None

        return (
            viewer.get('data-old-hires')
            or self._largest_dynamic_image(viewer.get('data-a-dynamic-image'))
            or high_resolution_url(viewer.get('src'))
        )

    @staticmethod
    def _largest_dynamic_image(raw: Optional[str]) -> Optional[str]:
        """Pick the largest entry of a {url: [width, height]} map."""
        result = parse_json(raw)
        if not result.ok:
            if raw:
                logger.debug("Unreadable data-a-dynamic-image: %s", result.error)
            return None
        if not isinstance(result.data, dict):
            return None

        best_url = None
        best_area = -1
        for url, size in result.data.items():
            try:
                width, height = size[0], size[1]
                area = float(width) * float(height)
            except (TypeError, ValueError, IndexError, KeyError):
                continue
            if area > best_area:
                best_url, best_area = url, area

        return best_url

    def extract_price(self, document: PageDocument) -> Optional[Decimal]:
        """
        Extract the price from the price widget.

        Tries the accessible price text, then the displayed-price value,
        then the separate whole/fraction spans.
        """
        us_storefront = is_us_storefront(document.location.hostname)

        for selector in OFFSCREEN_PRICE_SELECTORS:
            element = document.select_one(selector)
            if element is not None:
                price = normalize_retailer_price(element_text(element), us_storefront)
                if price is not None:
                    logger.debug("Amazon price from %s", selector)
                    return price

        for selector in DISPLAYED_PRICE_SELECTORS:
            element = document.select_one(selector)
            if element is None:
                continue
            value = element.get('value') or element.get('data-a-price')
            if value:
                price = normalize_retailer_price(value, us_storefront)
                if price is not None:
                    return price
            break

        whole_element = document.select_one('.a-price-whole')
        if whole_element is not None:
            whole = re.sub(r'\D', '', element_text(whole_element))
            fraction_element = document.select_one('.a-price-fraction')
            fraction = re.sub(r'\D', '', element_text(fraction_element)) or '00'
            if whole:
                return normalize_retailer_price(f"{whole}.{fraction}", us_storefront=True)

        return None

    def extract_currency(self, document: PageDocument) -> Optional[str]:
        """Currency from the storefront domain, else from the displayed symbol."""
        currency = currency_for_hostname(document.location.hostname)
        if currency:
            return currency

        element = document.select_one(PRICE_SYMBOL_SELECTOR)
        if element is not None:
            text = element_text(element)
            for symbol, code in CURRENCY_SYMBOLS:
                if symbol in text:
                    return code

        return None
