from .commit import apply_block, apply_blocks
from .core import apply_response, parse_and_apply
from .errors import (
    DiffsmithError,
    ExtractError,
    MalformedDiffError,
    PatchFailedError,
    QuotaExceeded,
)
from .extract import classify_response, parse_blocks
from .models import ApplyResult, EditBlock, MatchOutcome
from .publish import build_upload, repo_slug
from .quota import UsageQuota, client_address
from .stream import ResponseAccumulator
from .utils.text import cleanup_llm_output, extract_html_document

__all__ = [
    "parse_and_apply",
    "apply_response",
    "parse_blocks",
    "classify_response",
    "apply_block",
    "apply_blocks",
    "EditBlock",
    "MatchOutcome",
    "ApplyResult",
    "ResponseAccumulator",
    "UsageQuota",
    "client_address",
    "build_upload",
    "repo_slug",
    "cleanup_llm_output",
    "extract_html_document",
    "DiffsmithError",
    "ExtractError",
    "MalformedDiffError",
    "PatchFailedError",
    "QuotaExceeded",
]
