"""
Page Document

Read-only view over a loaded page: the parsed HTML tree plus the location it
was loaded from. All extraction steps query the page through this class and
never modify the tree.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional
from urllib.parse import urlparse

from bs4 import BeautifulSoup, Tag

_STYLE_DIMENSION = r'(?:^|;)\s*{name}\s*:\s*(\d+(?:\.\d+)?)px'


@dataclass(frozen=True)
class PageLocation:
    """Where the page was loaded from."""
    href: str
    hostname: str
    protocol: str

    @classmethod
    def from_url(cls, url: str) -> PageLocation:
        parsed = urlparse(url or "")
        return cls(
            href=url or "",
            hostname=(parsed.hostname or "").lower(),
            protocol=parsed.scheme.lower(),
        )


class PageDocument:
    """
    Snapshot of a loaded page.

    Usage:
        document = PageDocument.from_html(html, "https://shop.example/p/1")
        title = document.meta_value("og:title")
        scripts = document.json_ld_scripts()
    """

    def __init__(self, soup: BeautifulSoup, location: PageLocation):
        """
        Initialize the document.

        Args:
            soup: BeautifulSoup object of the page
            location: Location the page was loaded from
        """
        self.soup = soup
        self.location = location

    @classmethod
    def from_html(cls, html: str, url: str) -> PageDocument:
        """Parse an HTML string loaded from url."""
        return cls(BeautifulSoup(html or "", "lxml"), PageLocation.from_url(url))

    def select_one(self, selector: str) -> Optional[Tag]:
        return self.soup.select_one(selector)

    def select(self, selector: str) -> List[Tag]:
        return self.soup.select(selector)

    def find_all(self, tag_name: str) -> List[Tag]:
        return self.soup.find_all(tag_name)

    def meta_value(self, name: str) -> Optional[str]:
        """
        Get the content of the first meta tag whose property or name matches.

        Args:
            name: Meta key, e.g. "og:image" or "description"

        Returns:
            Content value, or None if the tag is missing or empty
        """
        for meta in self.soup.find_all('meta'):
            if meta.get('property') == name or meta.get('name') == name:
                content = meta.get('content')
                return content if content else None
        return None

    def json_ld_scripts(self) -> List[str]:
        """Raw text of every JSON-LD script, in document order."""
        scripts = self.soup.find_all('script', type='application/ld+json')
        return [script.string or script.get_text() for script in scripts]

    def canonical_href(self) -> Optional[str]:
        link = self.soup.find('link', rel='canonical')
        if link and link.get('href'):
            return link['href']
        return None

    def title_text(self) -> str:
        title = self.soup.find('title')
        return title.get_text() if title else ""


def element_text(element: Optional[Tag]) -> str:
    """Concatenated text content of an element, like the DOM's textContent."""
    if element is None:
        return ""
    return element.get_text()


def image_dimensions(img: Tag) -> tuple[float, float]:
    """
    Best known pixel size of an image element.

    Natural size (data-natural-width/height, recorded by a live browser) wins;
    rendered size from width/height attributes or inline style is the fallback.

    Returns:
        Tuple of (width, height), 0 for an unknown side
    """
    width = (
        _pixel_value(img.get('data-natural-width'))
        or _pixel_value(img.get('width'))
        or _style_dimension(img, 'width')
    )
    height = (
        _pixel_value(img.get('data-natural-height'))
        or _pixel_value(img.get('height'))
        or _style_dimension(img, 'height')
    )
    return width, height


def _pixel_value(value) -> float:
    if not value or not isinstance(value, str):
        return 0
    match = re.match(r'\s*(\d+(?:\.\d+)?)\s*(?:px)?\s*$', value)
    return float(match.group(1)) if match else 0


def _style_dimension(img: Tag, name: str) -> float:
    style = img.get('style')
    if not style or not isinstance(style, str):
        return 0
    match = re.search(_STYLE_DIMENSION.format(name=name), style.lower())
    return float(match.group(1)) if match else 0
