import json
import logging
import os
import sys
from datetime import datetime

from .error import stacktrace, error_dict


class _StdoutHandler(logging.StreamHandler):
    def emit(self, record):
        # sys.stdout can be swapped after import (redirects, captured output)
        self.stream = sys.stdout
        super().emit(record)


class Logger:
    def __init__(self, name: str, is_prod: bool):
        self.is_prod = is_prod
        self.__logger = logging.getLogger(name)
        self.__logger.propagate = False
        if not self.__logger.handlers:
            handler = _StdoutHandler()
            handler.setFormatter(logging.Formatter("%(message)s"))
            self.__logger.addHandler(handler)
        self.__logger.setLevel(logging.INFO)

    def set_level(self, level: int | str):
        if isinstance(level, str):
            level = logging.getLevelName(level.upper())
            if not isinstance(level, int):
                raise ValueError(f"Unknown log level: {level}")
        self.__logger.setLevel(level)

    def get_level(self) -> int:
        return self.__logger.level

    def debug(self, msg: str, attrs: dict | None = None):
        self.__log(logging.DEBUG, msg, attrs)

    def info(self, msg: str, attrs: dict | None = None):
        self.__log(logging.INFO, msg, attrs)

    def warn(self, msg: str, attrs: dict | None = None):
        self.__log(logging.WARNING, msg, attrs)

    def error(self, msg: str, attrs: dict | None = None):
        self.__log(logging.ERROR, msg, attrs)

    def __log(self, level: int, msg: str, attrs: dict | None):
        if not self.__logger.isEnabledFor(level):
            return
        self.__logger.log(level, self.__format(level, msg, attrs))

    def __format(self, level: int, msg: str, attrs: dict | None) -> str:
        level_name = logging.getLevelName(level)
        if self.is_prod:
            payload = {"level": level_name, "msg": msg}
            if attrs is not None:
                payload.update(attrs)
            return json.dumps(payload, ensure_ascii=False, default=str)

        now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{now}] {level_name:<5} {msg}"
        if attrs:
            line += " " + " ".join(f"{k}={v}" for k, v in attrs.items())
        return line


def get_error_info() -> tuple[str, dict]:
    ex = sys.exc_info()[1]
    if ex is None:
        return "Unknown error", {}
    attrs = error_dict(ex)
    attrs["stacktrace"] = stacktrace()
    return f"Error: {type(ex).__name__}", attrs


log = Logger("statsbuckets", is_prod=os.getenv("PY_ENV") == "prod")
