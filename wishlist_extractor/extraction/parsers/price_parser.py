"""
Price Parser

Turns displayed price strings into Decimal values. Shops format prices
differently ("$1,234.56", "1.234,56 €", "329,00"), so the decimal separator
has to be inferred:

- normalize_price: generic, infers the convention from the string shape
- normalize_retailer_price: retailer widgets, convention chosen up front
  from a currency symbol or the storefront
"""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

_NON_PRICE_CHARS = re.compile(r'[^\d.,\s-]')
_NON_RETAILER_CHARS = re.compile(r'[^\d.,]')

# "329,00329": text nodes of a price concatenated twice in the DOM
_DUPLICATED_PRICE = re.compile(r'^(\d+)[.,](\d{2})(\d+)$')

_TWO_DIGIT_DECIMAL = re.compile(r'[.,]\d{2}$')
_COMMA_DECIMAL = re.compile(r',\d{2}$')
_DOT_DECIMAL = re.compile(r'\.\d{2}$')
_SHORT_COMMA_DECIMAL = re.compile(r',\d{1,2}$')
_DOT_THOUSANDS = re.compile(r'^\d{1,3}(?:\.\d{3})+$')

# Leading number, the rest of the string is ignored
_LEADING_NUMBER = re.compile(r'-?(?:\d+(?:\.\d*)?|\.\d+)')

_CENTS = Decimal('0.01')


def normalize_price(raw) -> Decimal | None:
    """
    Parse a price string whose decimal convention is unknown.

    Args:
        raw: Displayed price (e.g. "1.234,56 €", "$1,234.56", "329,00329")

    Returns:
        Price rounded to cents, or None if no non-negative number is found
    """
    if raw is None:
        return None

    cleaned = _NON_PRICE_CHARS.sub('', str(raw)).strip()
    if not cleaned:
        return None

    duplicate = _DUPLICATED_PRICE.match(cleaned)
    if duplicate:
        whole, cents, tail = duplicate.groups()
        # Heuristic: also collapses genuine values like "12.3412"
        if whole.startswith(tail) or tail.startswith(whole):
            return _to_price(f"{whole}.{cents}")

    cleaned = re.sub(r'\s', '', cleaned)
    if _TWO_DIGIT_DECIMAL.search(cleaned):
        whole = re.sub(r'[.,]', '', cleaned[:-3])
        cleaned = f"{whole}.{cleaned[-2:]}"
    else:
        cleaned = cleaned.replace(',', '')

    return _to_price(cleaned)


def normalize_retailer_price(raw, us_storefront: bool = False) -> Decimal | None:
    """
    Parse a price from a retailer price widget.

    US convention (comma thousands, dot decimal) applies when the text
    carries a "$" or the page is a US storefront. Elsewhere the decimal
    point is a trailing ",5"/",56" or ".56"; any other separator groups
    thousands ("￥1,980", "1.234 €").

    Args:
        raw: Displayed price (e.g. "$29.99", "1.234,56 €")
        us_storefront: True when the page belongs to a US storefront

    Returns:
        Price rounded to cents, or None
    """
    if raw is None:
        return None

    text = str(raw).strip()
    us_format = '$' in text or us_storefront

    cleaned = _NON_RETAILER_CHARS.sub('', text)
    if not cleaned:
        return None

    if us_format:
        cleaned = cleaned.replace(',', '')
    elif _COMMA_DECIMAL.search(cleaned):
        cleaned = cleaned.replace('.', '').replace(',', '.', 1)
    elif _DOT_DECIMAL.search(cleaned):
        cleaned = cleaned.replace(',', '')
    elif _SHORT_COMMA_DECIMAL.search(cleaned):
        cleaned = cleaned.replace('.', '').replace(',', '.', 1)
    elif _DOT_THOUSANDS.match(cleaned):
        # "1.234": dot-grouped thousands, no cents
        cleaned = cleaned.replace('.', '')
    else:
        # "1,980" (yen), "1,299" (pound): comma is a thousands separator
        cleaned = cleaned.replace(',', '')

    return _to_price(cleaned)


def _to_price(text: str) -> Decimal | None:
    match = _LEADING_NUMBER.match(text)
    if not match:
        return None

    try:
        value = Decimal(match.group(0))
        if not value.is_finite() or value < 0:
            return None
        return value.quantize(_CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return None
