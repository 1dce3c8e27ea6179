from __future__ import annotations

from collections.abc import Callable, Iterable

import structlog

from streamstats.constants import StatisticKind
from streamstats.statistics.base import Statistic
from streamstats.statistics.extrema import Max, Min
from streamstats.statistics.moments import Mean, OnlineStd, Std

logger = structlog.get_logger(__name__)


class UnknownStatisticError(ValueError):
    pass


_FACTORIES: dict[StatisticKind, Callable[[bool], Statistic]] = {
    StatisticKind.MIN: lambda _legacy: Min(),
    StatisticKind.MAX: lambda legacy: Max(legacy_sentinel=legacy),
    StatisticKind.MEAN: lambda _legacy: Mean(),
    StatisticKind.STD: lambda _legacy: Std(),
    StatisticKind.STD_ONLINE: lambda _legacy: OnlineStd(),
}


def available_statistics() -> list[str]:
    return [kind.value for kind in StatisticKind]


def _resolve_kind(kind: StatisticKind | str) -> StatisticKind:
    if isinstance(kind, StatisticKind):
        return kind
    if not isinstance(kind, str):
        raise UnknownStatisticError(f"Statistic kind must be a string, got {type(kind).__name__}")
    try:
        return StatisticKind(kind.strip().lower())
    except ValueError as e:
        raise UnknownStatisticError(
            f"Unknown statistic {kind!r}; expected one of {', '.join(available_statistics())}"
        ) from e


def create_statistic(kind: StatisticKind | str, *, legacy_max_sentinel: bool = False) -> Statistic:
    resolved = _resolve_kind(kind)
    statistic = _FACTORIES[resolved](legacy_max_sentinel)
    logger.debug("Statistic created", kind=resolved.value, name=statistic.describe())
    return statistic


def create_statistics(
    kinds: Iterable[StatisticKind | str], *, legacy_max_sentinel: bool = False
) -> list[Statistic]:
    return [create_statistic(k, legacy_max_sentinel=legacy_max_sentinel) for k in kinds]
