"""
Product data models.

Pure data classes for representing extracted product information.
No business logic - only data structure definitions.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class PriceSource(Enum):
    """Cascade tier that produced a price. Used for precedence and logging only."""
    RETAILER_OVERRIDE = "retailer-override"
    SCHEMA_CONTENT_ATTRIBUTE = "schema-content-attribute"
    SCHEMA_TEXT = "schema-text"
    JSON_LD = "json-ld"
    META_TAG = "meta-tag"
    HEURISTIC_SELECTOR = "heuristic-selector"


@dataclass(frozen=True)
class ImageCandidate:
    """Page image considered by the size heuristic."""
    url: str
    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height


@dataclass(frozen=True)
class ExtractedProduct:
    """
    Product metadata extracted from one page snapshot.

    Field Groups:
    - Identity: canonical url, title, description (plain text)
    - Images: absolute URLs, unique, in priority order
    - Pricing: price (None when not found) and 3-letter currency code
    """

    url: str
    title: str = ""
    description: str = ""
    images: Tuple[str, ...] = field(default_factory=tuple)
    price: Optional[Decimal] = None
    currency: str = "EUR"

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready form; price becomes a number or None."""
        return {
            "url": self.url,
            "title": self.title,
            "description": self.description,
            "images": list(self.images),
            "price": float(self.price) if self.price is not None else None,
            "currency": self.currency,
        }
