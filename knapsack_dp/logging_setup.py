"""Logging for knapsack_dp: stdlib handlers whose records are rendered by structlog.

Solver classes log through ``logging.getLogger(...)`` while the CLI and the
benchmark use structlog loggers; both end up in the same root handlers and are
rendered by one ``ProcessorFormatter`` so console and file output look alike.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Union

import structlog

from .configuration import LoggingConfig

LOG_FILE_MAX_BYTES = 5 * 1024 * 1024
LOG_FILE_BACKUPS = 5
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_is_configured = False


def _resolve_config(config: Union[LoggingConfig, dict, None]) -> LoggingConfig:
    if config is None:
        return LoggingConfig()
    if isinstance(config, dict):
        return LoggingConfig(**config)
    return config


def _resolve_level(level: str) -> int:
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"unknown log level {level!r}")
    return value


def _shared_processors() -> List[structlog.types.Processor]:
    # 同时作用于 structlog 事件和标准库 LogRecord
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt=TIMESTAMP_FORMAT, key="timestamp"),
    ]


def _build_formatter(json_logs: bool) -> structlog.stdlib.ProcessorFormatter:
    if json_logs:
        tail = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        tail = [structlog.dev.ConsoleRenderer(colors=False)]
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_shared_processors(),
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *tail],
    )


def _build_handlers(config: LoggingConfig) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.log_dir:
        log_dir = Path(config.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                log_dir / f"{config.app_name}.log",
                maxBytes=LOG_FILE_MAX_BYTES,
                backupCount=LOG_FILE_BACKUPS,
                encoding="utf-8",
            )
        )
    return handlers


def setup_logging(config: Union[LoggingConfig, dict, None] = None) -> LoggingConfig:
    """Install the root handlers described by ``config`` and configure structlog.

    Calling it again replaces the previous handlers. Returns the resolved config.
    """

    global _is_configured
    resolved = _resolve_config(config)
    level = _resolve_level(resolved.level)
    formatter = _build_formatter(resolved.json_logs)

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        if isinstance(handler, logging.FileHandler):
            handler.close()
    root_logger.setLevel(level)
    for handler in _build_handlers(resolved):
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    logging.captureWarnings(resolved.capture_warnings)

    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    _is_configured = True
    return resolved


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    if not _is_configured:
        setup_logging()
    return structlog.get_logger(name)


def is_configured() -> bool:
    return _is_configured
