"""
Reusable validation helpers.
"""
# 说明：参数验证相关的辅助函数，用于在库内部统一进行轻量级参数检查。
# 职责：
# - ParamValidationError：专门用于参数校验失败的异常类型
# - ensure：基于布尔条件触发参数校验错误的轻量断言工具
# - ensure_int_in_range：整数参数的闭区间校验，拒绝 bool 与浮点数

from __future__ import annotations

from typing import Any, Type


class ParamValidationError(ValueError):
    """Raised when parameter validation fails."""


def ensure(condition: bool, message: str, *, error: Type[Exception] = ParamValidationError) -> None:
    # 条件不满足时抛出指定的异常类型（默认使用 ParamValidationError）
    if not condition:
        raise error(message)


def ensure_int_in_range(
    value: Any,
    low: int,
    high: int,
    message: str,
    *,
    error: Type[Exception] = ParamValidationError,
) -> int:
    """Return ``value`` if it is an int within ``[low, high]``, else raise ``error``."""
    # bool 是 int 的子类，这里显式排除，避免 True/False 被当作端口或范围
    if isinstance(value, bool) or not isinstance(value, int):
        raise error(message)
    if value < low or value > high:
        raise error(message)
    return value
