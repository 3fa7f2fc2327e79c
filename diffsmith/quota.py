"""
Per-address request quota for anonymous users.

Public API:
  - client_address(headers, remote_addr=None) -> str
  - UsageQuota(limit=4, *, window=None, clock=time.monotonic)
      .hit(address) -> QuotaDecision     atomic increment-and-check
      .check(address) -> QuotaDecision   same, raising QuotaExceeded when over
      .count(address) -> int
      .reset(address=None) -> None

`window=None` makes the limit a lifetime cap for the store; a number of seconds
turns it into a fixed window that restarts on the first hit after it elapses.
"""
from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Mapping, Optional, Tuple

from ._logging import resolve_logger
from .errors.quota import QuotaExceeded

__all__ = ["client_address", "UsageQuota", "QuotaDecision", "DEFAULT_LIMIT"]

DEFAULT_LIMIT = 4
UNKNOWN_ADDRESS = "0.0.0.0"


def client_address(headers: Mapping[str, str], remote_addr: Optional[str] = None) -> str:
    """
    Best guess at the caller's address: first X-Forwarded-For hop, then
    X-Real-IP, then the socket peer, then "0.0.0.0".
    """
    lowered = {k.lower(): v for k, v in headers.items()}
    forwarded = lowered.get("x-forwarded-for", "")
    if forwarded:
        first = forwarded.split(",")[0].strip()
        if first:
            return first
    real_ip = (lowered.get("x-real-ip") or "").strip()
    if real_ip:
        return real_ip
    return remote_addr or UNKNOWN_ADDRESS


@dataclass(frozen=True)
class QuotaDecision:
    address: str
    count: int
    limit: int
    allowed: bool

    @property
    def remaining(self) -> int:
        return max(self.limit - self.count, 0)


class UsageQuota:
    """Thread-safe address -> request count store."""

    def __init__(
        self,
        limit: int = DEFAULT_LIMIT,
        *,
        window: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
        logger=None,
        log: bool = False,
    ):
        if limit < 0:
            raise ValueError("limit must be >= 0")
        if window is not None and window <= 0:
            raise ValueError("window must be a positive number of seconds or None")
        self.limit = limit
        self.window = window
        self._clock = clock
        self._lock = threading.Lock()
        # address -> (count, window start)
        self._entries: Dict[str, Tuple[int, float]] = {}
        self._log = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.INFO)

    def _current(self, address: str, now: float) -> Tuple[int, float]:
        count, started = self._entries.get(address, (0, now))
        if self.window is not None and now - started >= self.window:
            return 0, now
        return count, started

    def hit(self, address: str) -> QuotaDecision:
        """Count one request for `address` and report whether it is within the limit."""
        with self._lock:
            now = self._clock()
            count, started = self._current(address, now)
            count += 1
            self._entries[address] = (count, started)
        decision = QuotaDecision(address=address, count=count, limit=self.limit, allowed=count <= self.limit)
        if not decision.allowed:
            self._log.info(f"Quota exceeded for {address}: {count}/{self.limit}")
        return decision

    def check(self, address: str) -> QuotaDecision:
        decision = self.hit(address)
        if not decision.allowed:
            raise QuotaExceeded(address, decision.count, decision.limit)
        return decision

    def count(self, address: str) -> int:
        with self._lock:
            if address not in self._entries:
                return 0
            return self._current(address, self._clock())[0]

    def reset(self, address: Optional[str] = None) -> None:
        with self._lock:
            if address is None:
                self._entries.clear()
            else:
                self._entries.pop(address, None)
