from .base import DiffsmithError


class QuotaExceeded(DiffsmithError):
    """An address used up its anonymous request allowance."""

    def __init__(self, address: str, count: int, limit: int):
        super().__init__(
            f"Request quota exceeded for {address} ({count}/{limit}). Log in to continue."
        )
        self.address = address
        self.count = count
        self.limit = limit
