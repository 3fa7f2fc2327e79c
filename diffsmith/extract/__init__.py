from .blocks import DIVIDER, MARKERS, REPLACE_END, SEARCH_START, contains_marker, parse_blocks
from .shape import (
    FULL_DOCUMENT,
    MALFORMED_DIFF,
    NO_CONTENT,
    classify_response,
    looks_like_full_document,
)

__all__ = [
    "parse_blocks",
    "contains_marker",
    "classify_response",
    "looks_like_full_document",
    "SEARCH_START",
    "DIVIDER",
    "REPLACE_END",
    "MARKERS",
    "MALFORMED_DIFF",
    "FULL_DOCUMENT",
    "NO_CONTENT",
]
