#!/usr/bin/env python3
"""
Single Page Extraction

Extracts wishlist product metadata from a saved HTML page and prints a
field report. The page URL is needed to resolve relative links and to
detect retailer sites.

Usage:
    python3 extract_page.py --file page.html --url https://shop.example/product/1
    python3 extract_page.py --file page.html --url https://www.amazon.de/dp/B0... --verbose
"""

import argparse
import json
import logging
import os
import sys

from wishlist_extractor.common import DEFAULT_SETTINGS, load_extraction_settings, setup_logging
from wishlist_extractor.extraction import get_page_info

logger = logging.getLogger("wishlist_extractor.cli")


def print_report(data: dict) -> None:
    """Print extracted fields with OK / MISSING status."""

    print("\n" + "="*80)
    print("EXTRACTION REPORT")
    print("="*80)

    title = data["title"]
    price = data["price"]
    fields = [
        ("URL", data["url"]),
        ("Title", f"{title[:70]}..." if len(title) > 70 else title),
        ("Description", f"{len(data['description'])} characters" if data["description"] else ""),
        ("Price", f"{price:.2f} {data['currency']}" if price is not None else ""),
        ("Currency", data["currency"]),
    ]

    print()
    for label, value in fields:
        status = "OK" if value else "MISSING"
        print(f"  [{status:7}] {label:15} {value or 'MISSING'}")

    print(f"\nIMAGES ({len(data['images'])} images):")
    for idx, url in enumerate(data["images"], 1):
        print(f"  {idx}. {url}")

    print("\n" + "="*80)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Extract product metadata from a saved HTML page"
    )
    parser.add_argument(
        "--file",
        required=True,
        help="Saved HTML page"
    )
    parser.add_argument(
        "--url",
        required=True,
        help="URL the page was loaded from"
    )
    parser.add_argument(
        "--config",
        help="Extraction settings YAML (default: built-in settings)"
    )
    parser.add_argument(
        "--output-json",
        help="Write the result envelope to this JSON file"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Debug logging and full JSON output"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only log warnings and errors"
    )

    args = parser.parse_args(argv)
    setup_logging(verbose=args.verbose, quiet=args.quiet)

    try:
        settings = load_extraction_settings(args.config) if args.config else DEFAULT_SETTINGS
        with open(args.file, 'r', encoding='utf-8', errors='replace') as f:
            html = f.read()
    except (OSError, ValueError) as e:
        logger.error("%s", e)
        result = {"success": False, "error": str(e)}
    else:
        result = get_page_info(html, args.url, settings)

    if result["success"]:
        print_report(result["data"])

    if args.output_json:
        directory = os.path.dirname(args.output_json)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(args.output_json, 'w', encoding='utf-8') as f:
            json.dump(result, f, indent=2, ensure_ascii=False)
        print(f"\nResults saved to: {args.output_json}")

    if args.verbose or not result["success"]:
        print(json.dumps(result, indent=2, ensure_ascii=False))

    return 0 if result["success"] else 1


if __name__ == "__main__":
    sys.exit(main())
