"""
Structured Data Parser

Parses JSON-LD structured data (schema.org) embedded in
<script type="application/ld+json"> tags and walks it for offer fields.

Each script is parsed on its own: a malformed script yields a failed
ParseResult and the remaining scripts are still read.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, List, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing one JSON fragment."""
    ok: bool
    data: Any = None
    error: str = ""


def parse_json(text: Optional[str]) -> ParseResult:
    """
    Parse a JSON fragment without raising.

    Args:
        text: Raw JSON text

    Returns:
        ParseResult with the decoded data, or ok=False and the error message
    """
    if text is None or not text.strip():
        return ParseResult(ok=False, error="empty")

    try:
        return ParseResult(ok=True, data=json.loads(text))
    except (json.JSONDecodeError, TypeError, RecursionError) as e:
        return ParseResult(ok=False, error=str(e))


def json_ld_payloads(scripts: List[str]) -> List[Any]:
    """
    Decode every JSON-LD script, skipping the ones that fail to parse.

    Payloads wrapped in "@graph" are replaced by their graph so the
    walker sees the entities directly.

    Args:
        scripts: Raw script texts in document order

    Returns:
        Decoded payloads in document order
    """
    payloads = []
    for index, script in enumerate(scripts):
        result = parse_json(script)
        if not result.ok:
            logger.debug("Skipping malformed JSON-LD script #%d: %s", index, result.error)
            continue

        data = result.data
        if isinstance(data, dict) and isinstance(data.get('@graph'), list):
            data = data['@graph']
        payloads.append(data)

    return payloads


def find_field(node: Any, field_name: str, relation_field: str = "offers") -> Any:
    """
    Search a JSON-LD node for a field, following a relation.

    Arrays are scanned in order and the first hit wins. Objects are searched
    through the relation field first (e.g. a Product's offers), then for the
    field itself. Any other value yields None.

    Args:
        node: Decoded JSON-LD value
        field_name: Field to find (e.g. "price", "priceCurrency")
        relation_field: Relation to descend into first

    Returns:
        The field value, or None if not found
    """
    if isinstance(node, list):
        for item in node:
            value = find_field(item, field_name, relation_field)
            if value is not None:
                return value
        return None

    if not isinstance(node, dict):
        return None

    related = node.get(relation_field)
    if related:
        value = find_field(related, field_name, relation_field)
        if value is not None:
            return value

    return node.get(field_name)
