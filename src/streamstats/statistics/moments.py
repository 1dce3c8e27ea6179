from __future__ import annotations

import math

from streamstats.constants import MEAN_NAME, STD_NAME, STD_ONLINE_NAME
from streamstats.statistics.base import Statistic


class Mean(Statistic):
    """Arithmetic mean from a running sum and count."""

    def __init__(self) -> None:
        self._sum = 0.0
        self._count = 0

    def consume(self, value: float) -> None:
        self._sum += value
        self._count += 1

    def evaluate(self) -> float:
        if self._count == 0:
            return math.nan
        return self._sum / self._count

    def describe(self) -> str:
        return MEAN_NAME


class Std(Statistic):
    """Population standard deviation, recomputed from every retained value.

    Memory grows with the number of observations; see OnlineStd for a
    constant-memory alternative.
    """

    def __init__(self) -> None:
        self._values: list[float] = []

    def consume(self, value: float) -> None:
        self._values.append(value)

    def evaluate(self) -> float:
        n = len(self._values)
        if n == 0:
            return math.nan

        total = 0.0
        for v in self._values:
            total += v
        mean = total / n
        accum = 0.0
        for v in self._values:
            accum += (v - mean) * (v - mean)

        return math.sqrt(accum / n)

    def describe(self) -> str:
        return STD_NAME


class OnlineStd(Statistic):
    """Population standard deviation using Welford's algorithm.

    Constant memory. Results can differ from Std in the last few bits.
    """

    def __init__(self) -> None:
        self._count = 0
        self._mean = 0.0
        self._m2 = 0.0

    def consume(self, value: float) -> None:
        self._count += 1
        delta = value - self._mean
        self._mean += delta / self._count
        delta2 = value - self._mean
        self._m2 += delta * delta2

    @property
    def count(self) -> int:
        return self._count

    @property
    def mean(self) -> float:
        if self._count == 0:
            return math.nan
        return self._mean

    @property
    def variance(self) -> float:
        if self._count == 0:
            return math.nan
        return self._m2 / self._count

    def evaluate(self) -> float:
        return math.sqrt(self.variance)

    def describe(self) -> str:
        return STD_ONLINE_NAME
