import pytest
from prometheus_client import CollectorRegistry

from statsbuckets.metric import MetricManager, request_retry_buckets
from statsbuckets.utils import InvalidArgumentError


def test_register_and_observe():
    registry = CollectorRegistry()
    manager = MetricManager(registry)
    stats = manager.register("segment_request_retry", "Retry counts", request_retry_buckets)

    manager.observe("segment_request_retry", 0)
    manager.observe("segment_request_retry", 4)
    manager.observe("segment_request_retry", 11)

    assert manager.get("segment_request_retry") is stats
    assert manager.names() == ["segment_request_retry"]
    assert stats.get_buckets() == [1, 0, 0, 0, 1, 0, 1]
    assert registry.get_sample_value("segment_request_retry_count") == 3
    assert registry.get_sample_value("segment_request_retry_bucket", {"le": "5.0"}) == 2


def test_register_duplicate():
    manager = MetricManager(CollectorRegistry())
    manager.register("foo_seconds", "Foo", [1.0])
    with pytest.raises(InvalidArgumentError):
        manager.register("foo_seconds", "Foo", [2.0])


def test_register_invalid_boundaries():
    registry = CollectorRegistry()
    manager = MetricManager(registry)
    with pytest.raises(InvalidArgumentError):
        manager.register("bar_seconds", "Bar", [2.0, 1.0])
    assert manager.names() == []
    assert registry.get_sample_value("bar_seconds_count") is None


def test_observe_unknown():
    manager = MetricManager(CollectorRegistry())
    assert manager.get("unknown") is None
    with pytest.raises(InvalidArgumentError):
        manager.observe("unknown", 1.0)


def test_snapshots():
    manager = MetricManager(CollectorRegistry())
    manager.register("a_seconds", "A", [1.0])
    manager.register("b_seconds", "B", [1.0])
    manager.observe("a_seconds", 0.5)

    snapshots = manager.snapshots()
    assert snapshots["a_seconds"].count == 1
    assert snapshots["b_seconds"].count == 0
