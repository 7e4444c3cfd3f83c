import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, constr

from .config_buckets import BucketsConfig, read_buckets_config
from ..utils import log


class Env(BaseModel):
    env: constr(min_length=1)
    log_level: constr(min_length=1)
    buckets: BucketsConfig


def get_env(dot_env_path: str | None = None) -> Env:
    env = os.getenv("PY_ENV") or None
    if env is None:
        env = "dev"
    if env == "dev":
        path = Path(dot_env_path) if dot_env_path is not None else Path.cwd() / "dev" / ".env"
        if path.exists():
            load_dotenv(path)
        else:
            log.debug(f"Dotenv file not found: {path}")

    return Env(
        env=env,
        log_level=os.getenv("LOG_LEVEL") or "INFO",
        buckets=read_buckets_config(),
    )
