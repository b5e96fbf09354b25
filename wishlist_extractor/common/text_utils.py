"""
Text Utilities

Helper functions for text processing and cleanup.
"""

import re

from bs4 import BeautifulSoup

_MARKUP_PATTERN = re.compile(r'<[a-zA-Z/!]')


def clean_string(text) -> str:
    """
    Collapse whitespace and newlines into single spaces.

    Text that still carries markup (some sites put HTML into meta content)
    is reduced to its text first.

    Args:
        text: Raw text, may be None

    Returns:
        Plain single-line text, empty string if nothing is left
    """
    if not text:
        return ""

    text = str(text)
    if _MARKUP_PATTERN.search(text):
        text = BeautifulSoup(text, "html.parser").get_text(" ")

    return ' '.join(text.split()).strip()
