from .base import DiffsmithError


class PatchFailedError(DiffsmithError):
    """
    A SEARCH/REPLACE block could not be placed in the document.

    Attributes:
        block_index: 1-based position of the failing block in the response.
        search / replace: the block as the model wrote it.
        context: slice of the document around the best-guess location.
    """

    def __init__(
        self,
        message: str,
        *,
        block_index: int | None = None,
        search: str = "",
        replace: str = "",
        context: str = "",
    ):
        super().__init__(message)
        self.block_index = block_index
        self.search = search
        self.replace = replace
        self.context = context
