from prometheus_client import CollectorRegistry

from statsbuckets import create_metric_manager, BucketsConfig, Env


def test_create_metric_manager():
    env = Env(
        env="test",
        log_level="WARNING",
        buckets=BucketsConfig(name="object_size_bytes", documentation="Object size", boundaries=[1024, 4096]),
    )
    registry = CollectorRegistry()
    manager = create_metric_manager(env, registry)
    manager.observe("object_size_bytes", 2000)

    assert manager.names() == ["object_size_bytes"]
    assert manager.get("object_size_bytes").get_buckets() == [0, 1, 0]
    assert registry.get_sample_value("object_size_bytes_bucket", {"le": "4096.0"}) == 1
