from .buckets import (
    default_buckets,
    request_duration_buckets,
    segment_request_duration_buckets,
    request_retry_buckets,
    object_size_buckets,
)
from .metric_manager import MetricManager
from .stats_buckets import StatsBuckets
from .stats_collector import StatsBucketsCollector, to_prometheus_buckets
from .stats_snapshot import StatsSnapshot
