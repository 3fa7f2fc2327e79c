# diffsmith/extract/blocks.py
from __future__ import annotations

import logging
from typing import List

from .._logging import resolve_logger
from ..models.blocks import EditBlock

SEARCH_START = "<<<<<<< SEARCH"
DIVIDER = "======="
REPLACE_END = ">>>>>>> REPLACE"

MARKERS = (SEARCH_START, DIVIDER, REPLACE_END)

_SCANNING = "scanning"
_IN_SEARCH = "in_search"
_IN_REPLACE = "in_replace"


def _preview(lines: list[str], limit: int = 3) -> str:
    head = "\n".join(lines[:limit])
    return head + ("\n..." if len(lines) > limit else "")


def parse_blocks(text: str, *, logger=None, log: bool = False) -> List[EditBlock]:
    """
    Extract SEARCH/REPLACE blocks from raw model output.

    Format (each marker on its own line, surrounding whitespace ignored):

        <<<<<<< SEARCH
        current lines (empty for a pure insertion)
        =======
        new lines (empty for a deletion)
        >>>>>>> REPLACE

    Prose between blocks is ignored. A block whose divider or terminator is
    missing is dropped; if a new SEARCH marker shows up while a block is still
    open, the open block is dropped and parsing restarts at that marker. Never
    raises; an empty list means no complete block was found.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)

    blocks: List[EditBlock] = []
    state = _SCANNING
    search_lines: list[str] = []
    replace_lines: list[str] = []
    opened_at = 0

    # Split on "\n" only so "\r" and other line content survive verbatim.
    for lineno, line in enumerate(text.split("\n"), 1):
        marker = line.strip()

        if state == _SCANNING:
            if marker == SEARCH_START:
                state, search_lines, replace_lines, opened_at = _IN_SEARCH, [], [], lineno
            continue

        if marker == SEARCH_START:
            missing = DIVIDER if state == _IN_SEARCH else REPLACE_END
            log.warning(
                f"Malformed block opened at line {opened_at}: missing {missing!r} before the "
                f"next {SEARCH_START!r} at line {lineno}. Dropping:\n"
                f"{_preview(search_lines if state == _IN_SEARCH else replace_lines)}"
            )
            state, search_lines, replace_lines, opened_at = _IN_SEARCH, [], [], lineno
            continue

        if state == _IN_SEARCH:
            if marker == DIVIDER:
                state = _IN_REPLACE
            else:
                search_lines.append(line)
            continue

        # _IN_REPLACE
        if marker == REPLACE_END:
            blocks.append(EditBlock(search="\n".join(search_lines), replace="\n".join(replace_lines)))
            log.debug(f"Parsed block #{len(blocks)} (lines {opened_at}-{lineno})")
            state = _SCANNING
        else:
            replace_lines.append(line)

    if state != _SCANNING:
        missing = DIVIDER if state == _IN_SEARCH else REPLACE_END
        log.warning(
            f"Malformed block opened at line {opened_at}: input ended before {missing!r}. Dropping:\n"
            f"{_preview(search_lines if state == _IN_SEARCH else replace_lines)}"
        )

    return blocks


def contains_marker(text: str) -> bool:
    """True if any SEARCH/REPLACE marker literal appears anywhere in `text`."""
    return any(m in text for m in MARKERS)
