request_duration_buckets = [0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0]
segment_request_duration_buckets = [0.1, 0.25, 0.5, 1.0, 1.5, 2.0, 3.0, 5.0, 10.0]
request_retry_buckets = [0, 1, 2, 3, 5, 10]
object_size_buckets = [1_024, 16_384, 131_072, 1_048_576, 8_388_608, 67_108_864]

default_buckets = request_duration_buckets
