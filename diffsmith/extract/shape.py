# diffsmith/extract/shape.py
from __future__ import annotations

from .blocks import contains_marker

MALFORMED_DIFF = "malformed_diff"
FULL_DOCUMENT = "full_document"
NO_CONTENT = "no_content"

FULL_DOCUMENT_PREFIXES = ("<!doctype html", "<html")


def looks_like_full_document(text: str) -> bool:
    """True if the stripped, lowercased text opens with a doctype or <html> tag."""
    return text.strip().lower().startswith(FULL_DOCUMENT_PREFIXES)


def classify_response(text: str) -> str:
    """
    Decide what a response with zero parsed blocks actually is.

    Order matters:
      1. any SEARCH/REPLACE marker present  -> MALFORMED_DIFF (the format was attempted)
      2. opens like a complete HTML document -> FULL_DOCUMENT
      3. anything else                       -> NO_CONTENT
    """
    if contains_marker(text):
        return MALFORMED_DIFF
    if looks_like_full_document(text):
        return FULL_DOCUMENT
    return NO_CONTENT
