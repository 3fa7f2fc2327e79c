# diffsmith/core.py
import logging

from ._logging import resolve_logger
from .commit import apply_blocks
from .commit.patch import DEFAULT_DELETE_THRESHOLD, DEFAULT_MATCH_THRESHOLD
from .errors import MalformedDiffError
from .extract import FULL_DOCUMENT, MALFORMED_DIFF, classify_response, parse_blocks
from .models import ApplyResult


def apply_response(
    original_document: str,
    model_response: str,
    *,
    match_threshold: float = DEFAULT_MATCH_THRESHOLD,
    delete_threshold: float = DEFAULT_DELETE_THRESHOLD,
    logger=None,
    log: bool = False,
) -> ApplyResult:
    """
    Turn a complete model response into the next version of the document.

    - SEARCH/REPLACE blocks found: applied in order, all or nothing (kind "diff").
    - No blocks but markers present: MalformedDiffError.
    - No blocks, response is a whole HTML document: used verbatim (kind "full_document").
    - Otherwise: the original document, untouched (kind "unchanged").

    `original_document` must be the snapshot taken when the turn started.

    Raises:
        MalformedDiffError: the response attempted the block format but nothing parsed.
        PatchFailedError: a block could not be placed; nothing is applied.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)

    blocks = parse_blocks(model_response, logger=log)
    if blocks:
        log.info(f"Found {len(blocks)} SEARCH/REPLACE block(s) to apply")
        document = apply_blocks(
            original_document,
            blocks,
            match_threshold=match_threshold,
            delete_threshold=delete_threshold,
            logger=log,
        )
        return ApplyResult(document=document, kind="diff", blocks_applied=len(blocks))

    log.warning("Response did not contain valid SEARCH/REPLACE blocks")
    shape = classify_response(model_response)
    if shape == MALFORMED_DIFF:
        raise MalformedDiffError()
    if shape == FULL_DOCUMENT:
        log.warning("Response looks like a full HTML document; using it as the new document")
        return ApplyResult(document=model_response, kind="full_document")

    log.warning("Response is neither a diff nor a full document; keeping the original")
    return ApplyResult(document=original_document, kind="unchanged")


def parse_and_apply(original_document: str, model_response: str, **kwargs) -> str:
    """Like `apply_response` but returns only the resulting document text."""
    return apply_response(original_document, model_response, **kwargs).document
