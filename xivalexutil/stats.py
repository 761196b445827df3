"""Rolling statistics over a bounded, optionally expiring window of integers."""

from __future__ import annotations

import math
import time
from collections import deque
from typing import Callable, Optional


def _monotonic_ms() -> int:
    return time.monotonic_ns() // 1_000_000


def _round_half_away(x: float) -> int:
    r = math.floor(abs(x) + 0.5)
    return int(r) if x >= 0 else -int(r)


class NumericStatisticsTracker:
    """Tracks the last ``track_count`` values, each expiring ``max_age`` ms after insertion.

    With ``max_age`` of ``None`` values never expire. Queries on an empty
    window return ``empty_value``.
    """

    def __init__(
        self,
        track_count: int,
        empty_value: int,
        max_age: Optional[int] = None,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self.track_count = track_count
        self.empty_value = empty_value
        self.max_age = max_age
        self._clock = clock or _monotonic_ms
        self._entries: deque[tuple[int, float]] = deque()

    def add_value(self, value: int) -> None:
        expiry = math.inf if self.max_age is None else self._clock() + self.max_age
        self._entries.append((value, expiry))
        while len(self._entries) > self.track_count:
            self._entries.popleft()

    def _values(self) -> list[int]:
        now = self._clock()
        while self._entries and self._entries[0][1] < now:
            self._entries.popleft()
        return [value for value, _ in self._entries]

    def latest(self) -> int:
        values = self._values()
        return values[-1] if values else self.empty_value

    def minimum(self) -> int:
        values = self._values()
        return min(values) if values else self.empty_value

    def maximum(self) -> int:
        values = self._values()
        return max(values) if values else self.empty_value

    def mean(self) -> int:
        values = self._values()
        if not values:
            return self.empty_value
        return _round_half_away(math.fsum(values) / len(values))

    def median(self) -> int:
        values = sorted(self._values())
        if not values:
            return self.empty_value
        half = len(values) // 2
        if len(values) % 2:
            return values[half]
        total = values[half] + values[half - 1]
        quotient = abs(total) // 2
        return quotient if total >= 0 else -quotient

    def deviation(self) -> int:
        """Population standard deviation, rounded; 0 with fewer than two values."""
        values = self._values()
        if len(values) < 2:
            return 0
        mean = math.fsum(values) / len(values)
        sum2 = math.fsum((v - mean) ** 2 for v in values)
        return _round_half_away(math.sqrt(sum2 / len(values)))

    def __len__(self) -> int:
        return len(self._values())

    def next_blank_in(self) -> float:
        """Milliseconds until the window has room again; 0 if it already has."""
        if len(self._values()) < self.track_count:
            return 0
        return self._entries[0][1] - self._clock()