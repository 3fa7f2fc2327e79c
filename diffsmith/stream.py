# diffsmith/stream.py
from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from ._logging import resolve_logger
from .core import apply_response
from .models import ApplyResult
from .utils.text import cleanup_llm_output, extract_html_document, preview_html_document

DIFF_MODE = "diff"
FULL_MODE = "full"


class ResponseAccumulator:
    """
    Collects a streamed model response for one turn.

    Chunks are appended in arrival order. In full mode `preview()` renders the
    partial document for live display; either way the document returned by
    `finish()` is derived from the complete text only.
    """

    def __init__(self, mode: str = DIFF_MODE, original: str = "", *, logger=None, log: bool = False, **apply_kwargs):
        if mode not in (DIFF_MODE, FULL_MODE):
            raise ValueError(f"mode must be {DIFF_MODE!r} or {FULL_MODE!r}")
        self.mode = mode
        self.original = original
        self.disconnected = False
        self._chunks: list[str] = []
        self._apply_kwargs = apply_kwargs
        self._log = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)

    @property
    def text(self) -> str:
        return "".join(self._chunks)

    def feed(self, chunk: str) -> None:
        if chunk:
            self._chunks.append(chunk)

    def consume(self, chunks: Iterable[str], is_disconnected: Optional[Callable[[], bool]] = None) -> "ResponseAccumulator":
        """
        Feed every chunk from `chunks`. Stops early, without raising, once
        `is_disconnected()` reports the client went away.
        """
        for chunk in chunks:
            if is_disconnected is not None and is_disconnected():
                self.disconnected = True
                self._log.info("Client disconnected before the response finished")
                break
            self.feed(chunk)
        return self

    def preview(self) -> Optional[str]:
        """Renderable partial document (full mode), or None before the doctype arrives."""
        if self.mode != FULL_MODE:
            return None
        return preview_html_document(self.text)

    def finish(self) -> ApplyResult:
        """
        Resolve the accumulated response into the next document.

        Raises the same errors as `apply_response` in diff mode.
        """
        if self.mode == DIFF_MODE:
            return apply_response(self.original, self.text, logger=self._log, **self._apply_kwargs)

        document = extract_html_document(cleanup_llm_output(self.text))
        if document is not None:
            return ApplyResult(document=document, kind="full_document")
        if self.text.strip():
            self._log.warning("Final response does not contain a complete HTML document")
        return ApplyResult(document=self.original, kind="unchanged")
