from itertools import accumulate

from pydantic import BaseModel


class StatsSnapshot(BaseModel):
    boundaries: list[float]
    buckets: list[int]
    count: int
    sum: float
    avg: float
    min: float
    max: float

    def cumulative(self) -> list[int]:
        return list(accumulate(self.buckets))
