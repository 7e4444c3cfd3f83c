import threading
from typing import Iterable

from prometheus_client import REGISTRY, CollectorRegistry

from .stats_buckets import StatsBuckets
from .stats_collector import StatsBucketsCollector
from .stats_snapshot import StatsSnapshot
from ..utils import InvalidArgumentError, log


class MetricManager:
    def __init__(self, registry: CollectorRegistry | None = None):
        self.__registry = registry if registry is not None else REGISTRY
        self.__lock = threading.Lock()
        self.__stats: dict[str, StatsBuckets] = {}

    def register(self, name: str, documentation: str, boundaries: Iterable[float]) -> StatsBuckets:
        stats = StatsBuckets(boundaries)
        with self.__lock:
            if name in self.__stats:
                raise InvalidArgumentError(f"Stats buckets already registered: name={name}", name)
            self.__registry.register(StatsBucketsCollector(name, documentation, stats))
            self.__stats[name] = stats
        log.info("Register stats buckets", {"name": name, "boundaries": list(stats.boundaries)})
        return stats

    def get(self, name: str) -> StatsBuckets | None:
        with self.__lock:
            return self.__stats.get(name)

    def names(self) -> list[str]:
        with self.__lock:
            return list(self.__stats.keys())

    def observe(self, name: str, value: float):
        stats = self.get(name)
        if stats is None:
            raise InvalidArgumentError(f"Not found stats buckets: name={name}", name)
        stats.add_value(value)

    def snapshots(self) -> dict[str, StatsSnapshot]:
        with self.__lock:
            items = list(self.__stats.items())
        return {name: stats.snapshot() for name, stats in items}
