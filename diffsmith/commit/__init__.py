from .core import apply_blocks
from .patch import (
    DEFAULT_DELETE_THRESHOLD,
    DEFAULT_MATCH_THRESHOLD,
    apply_block,
    failure_context,
    normalize_block,
)

__all__ = [
    "apply_block",
    "apply_blocks",
    "normalize_block",
    "failure_context",
    "DEFAULT_MATCH_THRESHOLD",
    "DEFAULT_DELETE_THRESHOLD",
]
