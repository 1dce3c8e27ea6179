from streamstats.statistics.base import Statistic
from streamstats.statistics.extrema import Max, Min
from streamstats.statistics.moments import Mean, OnlineStd, Std
from streamstats.statistics.registry import (
    UnknownStatisticError,
    available_statistics,
    create_statistic,
    create_statistics,
)

__all__ = [
    "Max",
    "Mean",
    "Min",
    "OnlineStd",
    "Statistic",
    "Std",
    "UnknownStatisticError",
    "available_statistics",
    "create_statistic",
    "create_statistics",
]
