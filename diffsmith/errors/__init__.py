from .base import DiffsmithError
from .extract import ExtractError, MalformedDiffError
from .patch import PatchFailedError
from .quota import QuotaExceeded

__all__ = [
    "DiffsmithError",
    "ExtractError",
    "MalformedDiffError",
    "PatchFailedError",
    "QuotaExceeded",
]
