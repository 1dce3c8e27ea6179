from abc import ABC, abstractmethod
from collections.abc import Iterable


class Statistic(ABC):
    """Running statistic fed one observation at a time.

    Implementations own their state exclusively and never raise: an empty
    accumulator reports a sentinel or NaN instead of an error.
    """

    @abstractmethod
    def consume(self, value: float) -> None:
        pass

    @abstractmethod
    def evaluate(self) -> float:
        pass

    @abstractmethod
    def describe(self) -> str:
        pass

    def consume_all(self, values: Iterable[float]) -> None:
        for value in values:
            self.consume(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.describe()!r}, value={self.evaluate()!r})"
