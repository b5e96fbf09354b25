"""
Data models for product extraction.

This module contains pure data classes with no business logic.
"""

from .product import ExtractedProduct, ImageCandidate, PriceSource

__all__ = ['ExtractedProduct', 'ImageCandidate', 'PriceSource']
