from streamstats.report import ObservationParseError, StatisticsReport, parse_observations
from streamstats.statistics import (
    Max,
    Mean,
    Min,
    OnlineStd,
    Statistic,
    Std,
    UnknownStatisticError,
    create_statistic,
    create_statistics,
)

__all__ = [
    "Max",
    "Mean",
    "Min",
    "ObservationParseError",
    "OnlineStd",
    "Statistic",
    "StatisticsReport",
    "Std",
    "UnknownStatisticError",
    "create_statistic",
    "create_statistics",
    "parse_observations",
]
