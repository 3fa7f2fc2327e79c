from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass
class MatchOutcome:
    """Result of placing a single block against one document version."""

    applied: bool
    text: Optional[str] = None
    tier: Optional[str] = None  # "fuzzy" | "exact" on success
    index: int = 1              # 1-based block position
    search: str = ""
    replace: str = ""
    context: str = ""           # document slice near the best-guess location (failures only)
    hunks: Tuple[bool, ...] = field(default_factory=tuple)


@dataclass
class ApplyResult:
    """Final document for one model response and how it was produced."""

    document: str
    kind: str  # "diff", "full_document" or "unchanged"
    blocks_applied: int = 0

    @property
    def changed(self) -> bool:
        return self.kind != "unchanged"
