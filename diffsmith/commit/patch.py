# diffsmith/commit/patch.py
from __future__ import annotations

import logging

from diff_match_patch import diff_match_patch

from .._logging import resolve_logger
from ..models.blocks import EditBlock
from ..models.outcome import MatchOutcome

__all__ = [
    "apply_block",
    "normalize_block",
    "failure_context",
    "DEFAULT_MATCH_THRESHOLD",
    "DEFAULT_DELETE_THRESHOLD",
]

# diff-match-patch scale: 0.0 demands a perfect match, 1.0 accepts anything.
DEFAULT_MATCH_THRESHOLD = 0.6
DEFAULT_DELETE_THRESHOLD = 0.6

CONTEXT_BEFORE = 150
CONTEXT_AFTER = 300


# ---------- normalization ----------

def normalize_block(document: str, block: EditBlock) -> tuple[str, str]:
    """
    Return the (search, replace) pair actually used for matching.

    - A search missing its final newline gets one back when the document has
      that text followed by a newline.
    - When the search ends in a newline, a non-empty replacement does too;
      an empty replacement stays empty (whole-line deletion).
    - An empty search inserts at the document start; the replacement is made
      to end in a newline so it lands on lines of its own.
    """
    search, replace = block.search, block.replace

    if not search:
        if replace and document and not replace.endswith("\n"):
            replace += "\n"
        return search, replace

    if not search.endswith("\n") and (search + "\n") in document:
        search += "\n"

    if search.endswith("\n"):
        if not block.replace:
            replace = ""
        elif not replace.endswith("\n"):
            replace += "\n"

    return search, replace


# ---------- diagnostics ----------

def _guess_location(document: str, search: str) -> int:
    """First search line if present, else its middle line, else the document start."""
    lines = search.split("\n")
    first = lines[0]
    idx = document.find(first) if first else -1
    if idx == -1 and len(lines) > 2:
        idx = document.find(lines[len(lines) // 2])
    return max(idx, 0)


def failure_context(
    document: str,
    search: str,
    *,
    before: int = CONTEXT_BEFORE,
    after: int = CONTEXT_AFTER,
) -> str:
    """Slice of `document` around where `search` was probably meant to be."""
    idx = _guess_location(document, search)
    start = max(0, idx - before)
    end = min(len(document), idx + len(search) + after)
    return document[start:end]


# ---------- tiers ----------

def _fuzzy_apply(
    document: str,
    search: str,
    replace: str,
    match_threshold: float,
    delete_threshold: float,
) -> tuple[str, tuple[bool, ...]]:
    dmp = diff_match_patch()
    dmp.Match_Threshold = match_threshold
    dmp.Patch_DeleteThreshold = delete_threshold
    patches = dmp.patch_make(search, replace)
    new_text, results = dmp.patch_apply(patches, document)
    return new_text, tuple(results)


def _exact_apply(document: str, search: str, replace: str) -> str | None:
    idx = document.find(search)
    if idx == -1:
        return None
    return document[:idx] + replace + document[idx + len(search):]


def apply_block(
    document: str,
    block: EditBlock,
    *,
    index: int = 1,
    match_threshold: float = DEFAULT_MATCH_THRESHOLD,
    delete_threshold: float = DEFAULT_DELETE_THRESHOLD,
    logger=None,
    log: bool = False,
) -> MatchOutcome:
    """
    Place one SEARCH/REPLACE block in `document`.

    Tier 1: diff-match-patch patch built from (search, replace) and applied to the
            whole document; every hunk has to land.
    Tier 2: replace the first literal occurrence of the search text.

    When both fail the outcome is not applied and carries the block plus a slice
    of the document around the best-guess location. Never raises.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)

    search, replace = normalize_block(document, block)
    if search != block.search or replace != block.replace:
        log.debug(f"[{index}] adjusted trailing newlines of search/replace")

    new_text, hunks = _fuzzy_apply(document, search, replace, match_threshold, delete_threshold)
    if all(hunks):
        log.debug(f"[{index}] fuzzy patch applied ({len(hunks)} hunk(s))")
        return MatchOutcome(
            applied=True, text=new_text, tier="fuzzy", index=index,
            search=block.search, replace=block.replace, hunks=hunks,
        )

    log.warning(f"[{index}] fuzzy patch failed, hunk results: {list(hunks)}; trying exact replacement")
    exact = _exact_apply(document, search, replace)
    if exact is not None:
        log.debug(f"[{index}] exact replacement of first occurrence")
        return MatchOutcome(
            applied=True, text=exact, tier="exact", index=index,
            search=block.search, replace=block.replace, hunks=hunks,
        )

    log.error(f"[{index}] exact replacement failed: search text not found")
    return MatchOutcome(
        applied=False,
        index=index,
        search=block.search,
        replace=block.replace,
        context=failure_context(document, block.search),
        hunks=hunks,
    )
