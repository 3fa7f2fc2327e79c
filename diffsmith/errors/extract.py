from .base import DiffsmithError


class ExtractError(DiffsmithError):
    """Model output could not be turned into edits."""


class MalformedDiffError(ExtractError):
    """The response used SEARCH/REPLACE markers but no complete block survived parsing."""

    def __init__(self, message: str | None = None):
        super().__init__(
            message
            or "Response contained malformed or unparseable SEARCH/REPLACE blocks. "
            "Could not apply changes."
        )
