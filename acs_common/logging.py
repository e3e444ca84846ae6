"""Shared logging configuration using structlog.

Interactive sheets draw on the terminal, so records go to stderr and the
default level is WARNING. ``ACS_LOG_LEVEL``, ``ACS_LOG_JSON`` and
``ACS_LOG_FILE`` fill in whatever the caller leaves unset.
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from typing import Mapping

import structlog

from acs_common.config.env import parse_bool_env

DEFAULT_LEVEL = logging.WARNING


def _level_from(value: str | int | None) -> int:
    if value is None:
        return DEFAULT_LEVEL
    if isinstance(value, int):
        return value
    text = value.strip()
    if text.isdigit():
        return int(text)
    resolved = logging.getLevelName(text.upper())
    return resolved if isinstance(resolved, int) else DEFAULT_LEVEL


@dataclass(frozen=True)
class LogConfig:
    level: int
    json: bool
    log_file: str | None

    @classmethod
    def resolve(
        cls,
        *,
        level: str | int | None = None,
        debug: bool = False,
        log_file: str | None = None,
        json: bool | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> "LogConfig":
        env = os.environ if environ is None else environ
        if debug:
            resolved_level = logging.DEBUG
        else:
            resolved_level = _level_from(level if level is not None else env.get("ACS_LOG_LEVEL"))
        if json is None:
            json = bool(parse_bool_env(env.get("ACS_LOG_JSON")))
        if log_file is None:
            log_file = env.get("ACS_LOG_FILE") or None
        return cls(level=resolved_level, json=json, log_file=log_file)


_PRE_CHAIN: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
]


def _formatter(json: bool) -> structlog.stdlib.ProcessorFormatter:
    renderer: structlog.types.Processor
    if json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    return structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=_PRE_CHAIN)


def _handlers(config: LogConfig) -> list[logging.Handler]:
    formatter = _formatter(config.json)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.log_file:
        handlers.append(logging.FileHandler(config.log_file, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def _configure_structlog() -> None:
    structlog.configure(
        processors=[*_PRE_CHAIN, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def configure_logging(
    *,
    level: str | int | None = None,
    debug: bool = False,
    log_file: str | None = None,
    json: bool | None = None,
    force: bool = False,
) -> LogConfig:
    """Configure stdlib logging and structlog with a shared formatter.

    Without ``force`` an already configured root logger keeps its handlers
    and level; only structlog is (re)configured on top of it.
    """
    config = LogConfig.resolve(level=level, debug=debug, log_file=log_file, json=json)
    root_logger = logging.getLogger()
    if force or not root_logger.handlers:
        if force:
            for handler in list(root_logger.handlers):
                root_logger.removeHandler(handler)
        for handler in _handlers(config):
            root_logger.addHandler(handler)
        root_logger.setLevel(config.level)
    _configure_structlog()
    return config
