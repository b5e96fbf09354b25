"""
Specialized parsers for product data extraction.

Each parser handles a specific data source:
- structured_data: JSON-LD payloads and the offers walker
- price_parser: Locale-ambiguous price strings
"""

from .price_parser import normalize_price, normalize_retailer_price
from .structured_data import ParseResult, find_field, json_ld_payloads, parse_json

__all__ = [
    'ParseResult',
    'find_field',
    'json_ld_payloads',
    'parse_json',
    'normalize_price',
    'normalize_retailer_price',
]
