"""
URL Utilities

Resolves image and link URLs found in a page into absolute URLs.
"""

from __future__ import annotations

import logging
from urllib.parse import urljoin, urlparse

logger = logging.getLogger(__name__)


def resolve_url(raw, base_href: str) -> str | None:
    """
    Resolve a URL string against the page URL.

    Absolute http(s) URLs pass through unchanged, protocol-relative URLs
    take the scheme of the base, everything else is joined to the base.

    Args:
        raw: URL as found in the page (may be None or blank)
        base_href: Absolute URL of the page

    Returns:
        Absolute URL, or None if it cannot be resolved
    """
    if not raw or not isinstance(raw, str) or not raw.strip():
        return None

    url = raw.strip()

    if url.startswith(('http://', 'https://')):
        return url

    try:
        base = urlparse(base_href or "")
        if url.startswith('//'):
            if not base.scheme:
                return None
            return f"{base.scheme}:{url}"

        if not base.scheme or not base.netloc:
            return None

        resolved = urljoin(base_href, url)
    except ValueError:
        logger.debug("Could not resolve URL %r against %r", url, base_href)
        return None

    parsed = urlparse(resolved)
    if parsed.scheme not in ('http', 'https') or not parsed.netloc:
        return None

    return resolved
