from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Optional, cast

import structlog
from loguru import logger as loguru_logger
from structlog.exceptions import DropEvent
from structlog.stdlib import BoundLogger
from structlog.typing import EventDict, WrappedLogger

from watsonkit.config.settings import log_dir


LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {message} | {extra}"
DEFAULT_LOG_FILENAME = "watsonkit.log"


@dataclass(slots=True)
class LoggingOptions:
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    stderr_sink: bool = True
    file_sink: bool = False
    log_path: Optional[Path] = None
    rotation: str = "10 MB"
    retention: str = "14 days"


_sink_ids: list[int] = []
_configured_log_path: Optional[Path] = None


def configure_logging(options: LoggingOptions | None = None) -> Optional[Path]:
    """Route watsonkit's structlog events into loguru.

    Importing watsonkit never calls this; applications opt in. Calling it again
    replaces only the sinks added by the previous call, so sinks the host
    application installed on loguru are left alone. Returns the log file path
    when a file sink was requested.
    """
    global _configured_log_path

    opts = options or LoggingOptions()
    level = "DEBUG" if opts.debug else opts.level

    for sink_id in _sink_ids:
        loguru_logger.remove(sink_id)
    _sink_ids.clear()
    _configured_log_path = None

    if opts.stderr_sink:
        _sink_ids.append(
            loguru_logger.add(
                sys.stderr,
                level=level,
                colorize=True,
                backtrace=opts.debug,
                diagnose=False,
                format=LOG_FORMAT,
            )
        )

    if opts.file_sink or opts.log_path is not None:
        log_path = opts.log_path or (log_dir() / DEFAULT_LOG_FILENAME)
        _sink_ids.append(
            loguru_logger.add(
                log_path,
                level="DEBUG",
                rotation=opts.rotation,
                retention=opts.retention,
                encoding="utf-8",
                format=LOG_FORMAT,
            )
        )
        _configured_log_path = log_path

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _log_to_loguru,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level, logging.INFO)
        ),
        cache_logger_on_first_use=True,
    )
    return _configured_log_path


def _log_to_loguru(
    _: WrappedLogger,
    __: str,
    event_dict: EventDict,
) -> EventDict:
    level = str(event_dict.pop("level", "INFO")).upper()
    event = event_dict.pop("event", "")
    event_dict.pop("stack", None)
    exception = event_dict.pop("exception", None)
    if exception:
        event = f"{event}\n{exception}"
    loguru_logger.bind(**event_dict).opt(depth=6).log(level, event)
    raise DropEvent


def get_logger(*initial_values: object, **initial_kw: object) -> BoundLogger:
    """Return a lazy structlog logger; configuration is left to the caller."""
    return cast(BoundLogger, structlog.get_logger(*initial_values, **initial_kw))


def log_file_path() -> Optional[Path]:
    return _configured_log_path


__all__ = ["LoggingOptions", "configure_logging", "get_logger", "log_file_path"]
