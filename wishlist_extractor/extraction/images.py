"""
Image Candidate Selection

Builds the ordered list of product image URLs for a page. Sources, in
priority order:

1. og:image meta
2. twitter:image meta
3. Elements marked itemprop="image"
4. Every <img> on the page that is large enough and not too elongated,
   largest area first

A retailer profile with its own image strategy replaces the whole cascade
when it finds at least one image.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from ..common.config_loader import DEFAULT_SETTINGS, ExtractionSettings
from ..common.url_utils import resolve_url
from ..models import ImageCandidate
from .document import PageDocument, image_dimensions
from .sites import GENERIC_PROFILE, SiteProfile, run_strategy

logger = logging.getLogger(__name__)


def select_images(
    document: PageDocument,
    profile: SiteProfile = GENERIC_PROFILE,
    settings: ExtractionSettings = DEFAULT_SETTINGS,
) -> List[str]:
    """
    Select product images for a page.

    Args:
        document: Page snapshot
        profile: Site profile of the page
        settings: Size and ratio thresholds

    Returns:
        Unique absolute image URLs in priority order
    """
    retailer_images = run_strategy(profile, 'extract_images', document, settings)
    if retailer_images:
        logger.debug("Using %d %s images", len(retailer_images), profile.name)
        return list(retailer_images)

    images = []
    seen_urls = set()
    base_href = document.location.href

    def add(raw: Optional[str]) -> None:
        url = resolve_url(raw, base_href)
        if url is None:
            if raw:
                logger.debug("Dropping unresolvable image URL %r", raw)
            return
        if url not in seen_urls:
            seen_urls.add(url)
            images.append(url)

    add(document.meta_value('og:image'))
    add(document.meta_value('twitter:image'))

    for element in document.select('[itemprop="image"]'):
        add(element.get('src') or element.get('content') or element.get('href'))

    for candidate in page_image_candidates(document, settings, exclude=seen_urls):
        add(candidate.url)

    return images


def page_image_candidates(
    document: PageDocument,
    settings: ExtractionSettings = DEFAULT_SETTINGS,
    exclude=frozenset(),
) -> List[ImageCandidate]:
    """
    Collect page images that pass the size and aspect-ratio filters.

    Args:
        document: Page snapshot
        settings: Size and ratio thresholds
        exclude: Absolute URLs already taken by a higher-priority source

    Returns:
        Candidates sorted by descending pixel area
    """
    candidates = []
    base_href = document.location.href

    for img in document.find_all('img'):
        src = _image_source(img)
        if not src:
            continue

        url = resolve_url(src, base_href)
        if not url or url in exclude:
            continue

        width, height = image_dimensions(img)
        if width < settings.min_dimension or height < settings.min_dimension or not height:
            continue

        ratio = width / height
        if ratio < settings.min_ratio or ratio > settings.max_ratio:
            continue

        candidates.append(ImageCandidate(url=url, width=width, height=height))

    # sorted() is stable: equal areas keep document order
    return sorted(candidates, key=lambda c: c.area, reverse=True)


def _image_source(img) -> Optional[str]:
    """src, or data-src when src is missing or an inline placeholder."""
    for attr in ('src', 'data-src'):
        value = (img.get(attr) or '').strip()
        if value and not value.startswith('data:'):
            return value
    return None
