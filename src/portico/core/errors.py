"""
Error hierarchy for port assignment and collision analysis.

Responsibilities
  - Separate user-input failures from internal defects.
  - Carry diagnostic context for out-of-bound port computations.
  - Report unreadable package descriptors and import maps.

Usage Context
  - Raised by the port assigner, the collision analyzer and the source readers.
  - Catch ``ParamValidationError`` for every input failure at once.

Limitations
  - Unknown hash or reducer names are not errors; they resolve to defaults.
"""
# 说明：端口分配与碰撞分析的异常体系，区分用户输入错误与实现缺陷。
# 职责：
# - PorticoError：库内统一基类异常
# - InvalidIdentifier / InvalidBasePort / InvalidRange / MalformedInput：输入校验失败
# - ImplementationInvariantViolated：哈希/归约组合产生越界偏移，属于实现缺陷
# - SourceError：package.json 或 import map 文件缺失、不可读或格式错误

from __future__ import annotations

from typing import Optional

from portico.core.utils.param_validation import ParamValidationError


class PorticoError(Exception):
    """Base error type for the portico library."""


class InvalidIdentifier(ParamValidationError, PorticoError):
    """Raised when an identifier is empty or not a string."""


class InvalidBasePort(ParamValidationError, PorticoError):
    """Raised when the base port is outside [1024, 65535]."""


class InvalidRange(ParamValidationError, PorticoError):
    """Raised when the port range is outside [1, 10000]."""


class MalformedInput(ParamValidationError, PorticoError):
    """Raised when an identifier source lacks the required shape."""


class SourceError(PorticoError, OSError):
    """Raised when a package descriptor or import map cannot be read."""


class ImplementationInvariantViolated(PorticoError, RuntimeError):
    """
    Raised when a hash/reducer pair produced a port outside the requested range.

    - Configuration
      - hash_name / reducer_name: The strategy that produced the value.
      - offset: The reducer output.
      - port: ``base_port + offset``.
      - base_port / range_size: The requested bounds.

    - Behavior
      - Formats a message naming the strategy, the offset and the expected bound.

    - Usage Notes
      - Indicates a bug in a (possibly custom) hash or reducer, never bad input.
    """

    def __init__(
        self,
        hash_name: str,
        reducer_name: str,
        *,
        offset: int,
        base_port: int,
        range_size: int,
        message: Optional[str] = None,
    ) -> None:
        # 保留完整的诊断上下文，便于定位是哪一个哈希/归约组合越界
        port = base_port + offset
        final_message = message or (
            f"hash '{hash_name}' + reducer '{reducer_name}' generated invalid port {port}. "
            f"Expected range: {base_port} to {base_port + range_size - 1}. "
            f"Offset: {offset}, Range: {range_size}. "
            "This indicates a bug in the implementation."
        )
        super().__init__(final_message)
        self.hash_name = hash_name
        self.reducer_name = reducer_name
        self.offset = offset
        self.port = port
        self.base_port = base_port
        self.range_size = range_size
