"""
Logging setup for the todo service.

`serve` hands uvicorn `log_config=None`, so this module is the only place that
configures logging: the service's own loggers and uvicorn's share one handler
on the root logger. Request fields attached by the HTTP middleware through
`extra=` show up as `key=value` pairs on the console and as top-level keys in
JSON output.
"""

from __future__ import annotations

import json
import logging
import logging.config
from datetime import datetime, timezone
from typing import Any, Dict, Iterator, Tuple

# Emitted first, in this order, when present on a record.
REQUEST_FIELDS = ("method", "path", "status", "duration_ms")

_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime"}


def record_fields(record: logging.LogRecord) -> Iterator[Tuple[str, Any]]:
    """Yield the fields a caller attached with `extra=`, request fields first."""
    for name in REQUEST_FIELDS:
        if hasattr(record, name):
            yield name, getattr(record, name)
    for name, value in vars(record).items():
        if name not in _RECORD_ATTRS and name not in REQUEST_FIELDS:
            yield name, value


class ConsoleFormatter(logging.Formatter):
    """`time | LEVEL | logger | message key=value ...`"""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        pairs = " ".join(f"{name}={value}" for name, value in record_fields(record))
        if not pairs:
            return line
        # Keep any traceback below the pairs.
        head, sep, tail = line.partition("\n")
        return f"{head} {pairs}{sep}{tail}"


class JsonFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(record_fields(record))
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def logging_config(level: str = "INFO", json_logs: bool = False) -> Dict[str, Any]:
    """
    Build the dictConfig mapping used by `configure_logging`.

    uvicorn's loggers hand their records to the root handler. Its access
    logger is held at WARNING because the request middleware already logs
    every request; httpx is held there too so `list` stays quiet.
    """
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "console": {"()": ConsoleFormatter},
            "json": {"()": JsonFormatter},
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "json" if json_logs else "console",
                "level": level,
            }
        },
        "loggers": {
            "uvicorn": {"level": level, "handlers": [], "propagate": True},
            "uvicorn.error": {"level": level, "handlers": [], "propagate": True},
            "uvicorn.access": {"level": "WARNING", "handlers": [], "propagate": True},
            "httpx": {"level": "WARNING", "handlers": [], "propagate": True},
        },
        "root": {
            "handlers": ["default"],
            "level": level,
        },
    }


def configure_logging(level: str = "INFO", json_logs: bool = False) -> None:
    """Configure root, uvicorn and httpx logging for the process."""
    logging.config.dictConfig(logging_config(level=level, json_logs=json_logs))


__all__ = [
    "REQUEST_FIELDS",
    "ConsoleFormatter",
    "JsonFormatter",
    "configure_logging",
    "logging_config",
    "record_fields",
]
