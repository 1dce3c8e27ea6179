from __future__ import annotations

from streamstats.constants import (
    LEGACY_MAX_SENTINEL,
    MAX_NAME,
    MAX_SENTINEL,
    MIN_NAME,
    MIN_SENTINEL,
)
from streamstats.statistics.base import Statistic


class Min(Statistic):
    """Smallest value seen so far.

    Starts from the largest finite double, which is what an empty Min reports.
    """

    def __init__(self) -> None:
        self._min = MIN_SENTINEL

    def consume(self, value: float) -> None:
        if value < self._min:
            self._min = value

    def evaluate(self) -> float:
        return self._min

    def describe(self) -> str:
        return MIN_NAME


class Max(Statistic):
    """Largest value seen so far.

    The default starting point is the most negative finite double, so streams
    of negative values are handled. Pass ``legacy_sentinel=True`` to start from
    the smallest positive double instead; an all-negative stream then never
    moves the result off that sentinel. The legacy mode exists only for
    compatibility with reports produced that way.
    """

    def __init__(self, legacy_sentinel: bool = False) -> None:
        self.legacy_sentinel = legacy_sentinel
        self._max = LEGACY_MAX_SENTINEL if legacy_sentinel else MAX_SENTINEL

    def consume(self, value: float) -> None:
        if value > self._max:
            self._max = value

    def evaluate(self) -> float:
        return self._max

    def describe(self) -> str:
        return MAX_NAME
