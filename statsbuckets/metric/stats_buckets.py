import bisect
import math
import threading
from typing import Iterable

from .stats_snapshot import StatsSnapshot
from ..utils import InvalidArgumentError


class StatsBuckets:
    """
    Frequency distribution of samples over a fixed set of boundaries.

    Bucket ``i`` counts the samples ``v`` with ``boundaries[i-1] < v <= boundaries[i]``;
    the last bucket holds the samples greater than every boundary.
    Sum, min and max stay NaN until the first sample is added,
    and ``get_avg()`` returns NaN while the histogram is empty.
    """

    def __init__(self, boundaries: Iterable[float]):
        self.__boundaries = _freeze_boundaries(boundaries)
        self.__lock = threading.Lock()
        self.__buckets = [0] * (len(self.__boundaries) + 1)
        self.__count = 0
        self.__sum = math.nan
        self.__min = math.nan
        self.__max = math.nan

    @property
    def boundaries(self) -> tuple[float, ...]:
        return self.__boundaries

    def add_value(self, value: float):
        value = float(value)
        # NaN compares false against every boundary and lands in the first bucket
        idx = bisect.bisect_left(self.__boundaries, value)

        with self.__lock:
            self.__buckets[idx] += 1
            if self.__count == 0:
                self.__sum = 0.0
            self.__sum += value
            self.__count += 1

            if math.isnan(self.__min) or value < self.__min:
                self.__min = value
            if math.isnan(self.__max) or value > self.__max:
                self.__max = value

    def get_buckets(self) -> list[int]:
        with self.__lock:
            return list(self.__buckets)

    def get_count(self) -> int:
        with self.__lock:
            return self.__count

    def get_sum(self) -> float:
        with self.__lock:
            return self.__sum

    def get_avg(self) -> float:
        with self.__lock:
            return self.__avg()

    def get_min(self) -> float:
        with self.__lock:
            return self.__min

    def get_max(self) -> float:
        with self.__lock:
            return self.__max

    def snapshot(self) -> StatsSnapshot:
        with self.__lock:
            return StatsSnapshot(
                boundaries=list(self.__boundaries),
                buckets=list(self.__buckets),
                count=self.__count,
                sum=self.__sum,
                avg=self.__avg(),
                min=self.__min,
                max=self.__max,
            )

    def __avg(self) -> float:
        if self.__count == 0:
            return math.nan
        return self.__sum / self.__count

    def __repr__(self) -> str:
        return f"StatsBuckets(boundaries={list(self.__boundaries)})"


def _freeze_boundaries(boundaries: Iterable[float]) -> tuple[float, ...]:
    if isinstance(boundaries, (str, bytes)):
        raise InvalidArgumentError("Boundaries must be a sequence of numbers, not a string", boundaries)
    try:
        frozen = tuple(float(b) for b in boundaries)
    except (TypeError, ValueError, OverflowError) as ex:
        raise InvalidArgumentError(f"Boundaries must be real numbers: {ex}", boundaries) from ex

    if len(frozen) == 0:
        raise InvalidArgumentError("Boundaries array must not be empty", frozen)
    if any(math.isnan(b) for b in frozen):
        raise InvalidArgumentError("Boundaries array must not contain NaN", frozen)
    if not _is_sorted(frozen):
        raise InvalidArgumentError("Boundaries array must be sorted", frozen)
    return frozen


def _is_sorted(values: tuple[float, ...]) -> bool:
    previous = -math.inf
    for value in values:
        if value < previous:
            return False
        previous = value
    return True
