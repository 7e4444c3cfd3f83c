import math

from prometheus_client.core import HistogramMetricFamily
from prometheus_client.registry import Collector
from prometheus_client.utils import floatToGoString

from .stats_buckets import StatsBuckets
from .stats_snapshot import StatsSnapshot


class StatsBucketsCollector(Collector):
    def __init__(self, name: str, documentation: str, stats: StatsBuckets):
        self.name = name
        self.documentation = documentation
        self.stats = stats

    def describe(self):
        yield HistogramMetricFamily(self.name, self.documentation)

    def collect(self):
        snapshot = self.stats.snapshot()
        yield HistogramMetricFamily(
            self.name,
            self.documentation,
            buckets=to_prometheus_buckets(snapshot),
            sum_value=snapshot.sum if snapshot.count > 0 else 0.0,
        )


def to_prometheus_buckets(snapshot: StatsSnapshot) -> list[tuple[str, float]]:
    cumulative = snapshot.cumulative()
    by_le: dict[str, float] = {}
    for boundary, value in zip(snapshot.boundaries, cumulative):
        if math.isinf(boundary) and boundary > 0:
            continue
        # later duplicates overwrite earlier ones, keeping insertion order
        by_le[floatToGoString(boundary)] = value
    result = list(by_le.items())
    result.append(("+Inf", snapshot.count))
    return result
