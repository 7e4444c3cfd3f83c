from .config_buckets import BucketsConfig, read_buckets_config, parse_boundaries
from .env import Env, get_env
