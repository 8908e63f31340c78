"""Utility for generating IDs for heading permalinks."""

import re

WHITESPACE_RE = re.compile(r"\s+")
# Commas, parentheses and colons are dropped, not replaced.
STRIP_PUNCTUATION_RE = re.compile(r"[,():]+")

# Headings whose historical anchor can't be derived from the title.
LEGACY_IDS = {"Parsing (Obsolete and removed)": "parsing"}


def generate_id(title: str) -> str:
    """Generate a permalink ID for a heading: hyphenate whitespace, lower."""
    if title in LEGACY_IDS:
        return LEGACY_IDS[title]
    title = WHITESPACE_RE.sub("-", title)
    title = STRIP_PUNCTUATION_RE.sub("", title)
    return title.lower()
