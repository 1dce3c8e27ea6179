import enum
import sys


class StatisticKind(str, enum.Enum):
    MIN = "min"
    MAX = "max"
    MEAN = "mean"
    STD = "std"
    STD_ONLINE = "std_online"


MIN_NAME: str = "min value"
MAX_NAME: str = "max value"
MEAN_NAME: str = "average value"
STD_NAME: str = "standard deviation"
STD_ONLINE_NAME: str = "standard deviation (online)"

MIN_SENTINEL: float = sys.float_info.max
MAX_SENTINEL: float = -sys.float_info.max
# Smallest positive normal double; the historical Max starting point.
LEGACY_MAX_SENTINEL: float = sys.float_info.min

DEFAULT_STATISTICS: list[StatisticKind] = [
    StatisticKind.MIN,
    StatisticKind.MAX,
    StatisticKind.MEAN,
    StatisticKind.STD,
]
DEFAULT_PRECISION: int = 6
