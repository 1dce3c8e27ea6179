from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

import structlog

from streamstats.constants import DEFAULT_PRECISION
from streamstats.statistics import Statistic, create_statistics

if TYPE_CHECKING:
    from streamstats.config import Settings

logger = structlog.get_logger(__name__)


class ObservationParseError(ValueError):
    def __init__(self, token: str, position: int) -> None:
        self.token = token
        self.position = position
        super().__init__(f"Invalid observation {token!r} at position {position}")


def parse_observations(text: str) -> list[float]:
    """Parse whitespace-separated numbers.

    Raises ObservationParseError on the first token that is not a number.
    """
    values: list[float] = []
    for position, token in enumerate(text.split()):
        try:
            values.append(float(token))
        except ValueError as e:
            raise ObservationParseError(token, position) from e
    return values


class StatisticsReport:
    """Feeds every observation to a set of statistics and formats the results."""

    def __init__(self, statistics: Sequence[Statistic], precision: int = DEFAULT_PRECISION) -> None:
        self._statistics = list(statistics)
        self._precision = precision
        self._count = 0

    @classmethod
    def from_settings(cls, settings: Settings) -> StatisticsReport:
        statistics = create_statistics(
            settings.statistics, legacy_max_sentinel=settings.legacy_max_sentinel
        )
        return cls(statistics, precision=settings.precision)

    @property
    def statistics(self) -> list[Statistic]:
        return list(self._statistics)

    @property
    def count(self) -> int:
        return self._count

    def feed(self, value: float) -> None:
        for statistic in self._statistics:
            statistic.consume(value)
        self._count += 1

    def feed_all(self, values: Iterable[float]) -> None:
        for value in values:
            self.feed(value)
        logger.debug("Observations consumed", total=self._count)

    def results(self) -> list[tuple[str, float]]:
        return [(s.describe(), s.evaluate()) for s in self._statistics]

    def render(self) -> str:
        return "\n".join(
            f"{name} = {value:.{self._precision}g}" for name, value in self.results()
        )
