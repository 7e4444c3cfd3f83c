from prometheus_client import CollectorRegistry

from .config import Env, BucketsConfig
from .metric import MetricManager, StatsBuckets
from .utils import log


def register_buckets(manager: MetricManager, conf: BucketsConfig) -> StatsBuckets:
    return manager.register(conf.name, conf.documentation, conf.boundaries)


def create_metric_manager(env: Env, registry: CollectorRegistry | None = None) -> MetricManager:
    log.set_level(env.log_level)
    manager = MetricManager(registry)
    register_buckets(manager, env.buckets)
    log.info("Metric manager ready", {"env": env.env, "names": manager.names()})
    return manager
