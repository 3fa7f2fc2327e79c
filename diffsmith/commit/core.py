# diffsmith/commit/core.py
from __future__ import annotations

import logging
from typing import Sequence

from .._logging import resolve_logger
from ..errors.patch import PatchFailedError
from ..models.blocks import EditBlock
from .patch import DEFAULT_DELETE_THRESHOLD, DEFAULT_MATCH_THRESHOLD, apply_block


def apply_blocks(
    document: str,
    blocks: Sequence[EditBlock],
    *,
    match_threshold: float = DEFAULT_MATCH_THRESHOLD,
    delete_threshold: float = DEFAULT_DELETE_THRESHOLD,
    logger=None,
    log: bool = False,
) -> str:
    """
    Apply `blocks` to `document` strictly in order, all or nothing.

    Block i+1 is matched against the output of block i. The first block that
    cannot be placed aborts the run; later blocks are not attempted and the
    caller keeps its original document.

    Raises:
        PatchFailedError: naming the 1-based index of the failing block.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)

    if not blocks:
        return document

    log.debug(f"Applying {len(blocks)} block(s)")
    current = document
    for i, block in enumerate(blocks, 1):
        outcome = apply_block(
            current,
            block,
            index=i,
            match_threshold=match_threshold,
            delete_threshold=delete_threshold,
            logger=log,
        )
        if not outcome.applied:
            log.error(
                f"Failed to apply block {i}:\n"
                f"--- SEARCH ---\n{block.search}\n"
                f"--- REPLACE ---\n{block.replace}\n"
                f"--- CURRENT CONTEXT (approx) ---\n{outcome.context}"
            )
            raise PatchFailedError(
                f"Failed to apply change {i} of {len(blocks)}. "
                "The SEARCH block might not match the current document.",
                block_index=i,
                search=block.search,
                replace=block.replace,
                context=outcome.context,
            )
        log.debug(f"Block {i} applied via {outcome.tier} match")
        current = outcome.text

    log.debug("All blocks applied")
    return current
