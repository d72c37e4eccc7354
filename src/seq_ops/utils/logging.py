from __future__ import annotations

import logging
from typing import Any, Optional

import structlog

from ..config.settings import get_settings


def configure_logging(verbose: Optional[bool] = None) -> None:
    """初始化结构化日志。未指定 verbose 时读取 SEQ_OPS_VERBOSE。

    供应用程序入口调用：会修改 structlog 全局配置并调用 logging.basicConfig，
    库内部的函数从不调用它。
    """
    if verbose is None:
        verbose = get_settings().verbose
    log_level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(level=log_level, format="%(message)s")

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> Any:
    return structlog.get_logger(name) if name else structlog.get_logger()
