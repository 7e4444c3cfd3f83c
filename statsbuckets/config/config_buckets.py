import os

from pydantic import BaseModel, Field, constr

from ..metric.buckets import default_buckets
from ..utils import InvalidArgumentError

DEFAULT_BUCKETS_NAME = "stats_buckets"


class BucketsConfig(BaseModel):
    name: constr(min_length=1)
    documentation: str
    boundaries: list[float] = Field(min_length=1)


def parse_boundaries(text: str) -> list[float]:
    parts = [part.strip() for part in text.split(",")]
    if any(part == "" for part in parts):
        raise InvalidArgumentError(f"Empty boundary in list: {text}", text)
    try:
        return [float(part) for part in parts]
    except ValueError as ex:
        raise InvalidArgumentError(f"Invalid boundary list: {text}", text) from ex


def read_buckets_config() -> BucketsConfig:
    boundaries_text = os.getenv("STATS_BUCKETS_BOUNDARIES") or None
    if boundaries_text is None:
        boundaries = list(default_buckets)
    else:
        boundaries = parse_boundaries(boundaries_text)

    return BucketsConfig(
        name=os.getenv("STATS_BUCKETS_NAME") or DEFAULT_BUCKETS_NAME,
        documentation=os.getenv("STATS_BUCKETS_DOC") or "Frequency distribution of samples",
        boundaries=boundaries,
    )
