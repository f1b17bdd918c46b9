"""
Lightweight logging helpers.
"""
# 说明：轻量级日志工具，提供统一的 logger 获取入口与默认格式。
# 职责：
# - IdentifierFilter：截断日志记录中过长的 identifiers 字段，避免大型 import map 刷屏
# - configure_logging(...)：初始化 logging 基本配置并为根 logger 挂载过滤器
# - get_logger(...)：按名称获取 logger，必要时自动完成日志系统初始化
# 约定：
# - 日志级别优先级：显式参数 level > 环境变量 PORTICO_LOG_LEVEL > 运行时配置的 log_level

from __future__ import annotations

import logging
import os
from typing import Optional

from .config import get_config

MAX_LOGGED_IDENTIFIERS = 10


class IdentifierFilter(logging.Filter):
    """Filter that shortens long ``identifiers`` attributes on log records."""

    def __init__(self, limit: int = MAX_LOGGED_IDENTIFIERS) -> None:
        super().__init__()
        self.limit = limit

    def filter(self, record: logging.LogRecord) -> bool:
        identifiers = getattr(record, "identifiers", None)
        if isinstance(identifiers, (list, tuple)) and len(identifiers) > self.limit:
            # 保留前 limit 个名称并追加剩余数量提示
            hidden = len(identifiers) - self.limit
            record.identifiers = list(identifiers[: self.limit]) + [f"... (+{hidden} more)"]
        return True


def configure_logging(level: Optional[str] = None) -> None:
    # 初始化根 logger：确定最终日志级别、设置格式，并挂载 IdentifierFilter
    log_level = level or os.environ.get("PORTICO_LOG_LEVEL", get_config().log_level)
    logging.basicConfig(
        level=log_level,
        format="[%(levelname)s] %(name)s %(asctime)s | %(message)s",
    )
    root = logging.getLogger()
    root.setLevel(log_level)
    # 过滤器挂在 handler 上，子 logger 传播上来的记录同样会经过它
    for handler in root.handlers:
        if not any(isinstance(f, IdentifierFilter) for f in handler.filters):
            handler.addFilter(IdentifierFilter())


def get_logger(name: str) -> logging.Logger:
    # 获取指定名称的 logger，若尚无 handler，则懒加载方式调用 configure_logging 进行初始化
    logger = logging.getLogger(name)
    if not logger.handlers and not logging.getLogger().handlers:
        configure_logging()
    return logger
