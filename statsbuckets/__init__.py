from .app import create_metric_manager, register_buckets
from .config import Env, BucketsConfig, get_env, read_buckets_config
from .metric import MetricManager, StatsBuckets, StatsBucketsCollector, StatsSnapshot
from .utils import InvalidArgumentError, log
