from .blocks import EditBlock
from .outcome import ApplyResult, MatchOutcome

__all__ = ["EditBlock", "MatchOutcome", "ApplyResult"]
