from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def configure_logging(verbose: bool = False, json_output: bool = False) -> None:
    """初始化结构化日志（输出到 stderr，stdout 留给命令结果）。"""
    log_level = logging.DEBUG if verbose else logging.WARNING

    logging.basicConfig(level=log_level, format="%(message)s", stream=sys.stderr)

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> Any:
    return structlog.get_logger(name) if name else structlog.get_logger()
