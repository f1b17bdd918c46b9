"""
Deterministic port assignment from an identifier.

Responsibilities
  - Validate the identifier, base port and range before any hashing.
  - Compose a hash function and a reducer into a bounded port number.
  - Catch out-of-bound offsets from faulty strategies as internal defects.

Usage Context
  - ``compute_port`` is the primary entry point for a single package name.
  - ``PortAssigner`` binds injectable strategy tables for analysis and tests.

Limitations
  - Unknown strategy names silently resolve to ``twin`` / ``knuth``.
"""
# 说明：由标识符（包名）确定性地计算开发端口，组合哈希函数与归约函数并做边界校验。
# 职责：
# - validate_port_request：按 identifier -> base_port -> range 的顺序校验输入
# - PortAssigner：持有可注入的哈希/归约策略表，执行 hash -> reduce -> 后置断言
# - compute_port：使用内置策略表的便捷入口
# 约定：
# - 后置断言失败抛出 ImplementationInvariantViolated，与输入校验错误严格区分

from __future__ import annotations

from typing import Optional

from portico.core.errors import (
    ImplementationInvariantViolated,
    InvalidBasePort,
    InvalidIdentifier,
    InvalidRange,
)
from portico.core.utils.config import (
    DEFAULT_BASE_PORT,
    DEFAULT_HASH,
    DEFAULT_RANGE,
    DEFAULT_REDUCER,
)
from portico.core.utils.param_validation import ensure, ensure_int_in_range
from portico.hashing.registry import HASH_FUNCTIONS, REDUCERS, StrategyKey, StrategyTable

MIN_BASE_PORT = 1024
MAX_BASE_PORT = 65535
MIN_RANGE = 1
MAX_RANGE = 10000


def validate_identifier(identifier: object) -> str:
    # 标识符必须为非空字符串
    ensure(
        isinstance(identifier, str) and len(identifier) > 0,
        "Package name must be a non-empty string",
        error=InvalidIdentifier,
    )
    return identifier  # type: ignore[return-value]


def validate_bounds(base_port: object, range_size: object) -> None:
    # 基准端口与端口范围的闭区间校验
    ensure_int_in_range(
        base_port,
        MIN_BASE_PORT,
        MAX_BASE_PORT,
        f"Base port must be between {MIN_BASE_PORT} and {MAX_BASE_PORT}",
        error=InvalidBasePort,
    )
    ensure_int_in_range(
        range_size,
        MIN_RANGE,
        MAX_RANGE,
        f"Port range must be between {MIN_RANGE} and {MAX_RANGE}",
        error=InvalidRange,
    )


def validate_port_request(identifier: object, base_port: object, range_size: object) -> None:
    """Validate a request in the documented order; raise on the first failure."""
    validate_identifier(identifier)
    validate_bounds(base_port, range_size)


class PortAssigner:
    """
    Compose a hash function and a reducer into a validated port number.

    - Configuration
      - hashes: Hash strategy table (defaults to the built-in table).
      - reducers: Reducer strategy table (defaults to the built-in table).

    - Behavior
      - Holds no mutable state; ``assign`` is a pure function of its inputs.
      - Verifies ``base_port <= port < base_port + range_size`` after reducing.

    - Usage Notes
      - Inject custom tables to evaluate experimental strategies.
    """

    def __init__(
        self,
        hashes: Optional[StrategyTable] = None,
        reducers: Optional[StrategyTable] = None,
    ) -> None:
        self.hashes = HASH_FUNCTIONS if hashes is None else hashes
        self.reducers = REDUCERS if reducers is None else reducers

    def assign(
        self,
        identifier: str,
        base_port: int = DEFAULT_BASE_PORT,
        range_size: int = DEFAULT_RANGE,
        hash_name: StrategyKey = DEFAULT_HASH,
        reducer_name: StrategyKey = DEFAULT_REDUCER,
    ) -> int:
        """Return the port for ``identifier``."""
        validate_port_request(identifier, base_port, range_size)

        resolved_hash, hash_fn = self.hashes.resolve(hash_name)
        resolved_reducer, reducer_fn = self.reducers.resolve(reducer_name)

        offset = reducer_fn(hash_fn(identifier), range_size)
        port = base_port + offset
        # 归约函数可插拔，越界结果必须在此拦截而不是向下游传播
        if port < base_port or port >= base_port + range_size:
            raise ImplementationInvariantViolated(
                resolved_hash,
                resolved_reducer,
                offset=offset,
                base_port=base_port,
                range_size=range_size,
            )
        return port


_DEFAULT_ASSIGNER = PortAssigner()


def compute_port(
    identifier: str,
    base_port: int = DEFAULT_BASE_PORT,
    range_size: int = DEFAULT_RANGE,
    hash_name: StrategyKey = DEFAULT_HASH,
    reducer_name: StrategyKey = DEFAULT_REDUCER,
) -> int:
    """
    Generate a stable development port for a package name.

    Args:
        identifier: Non-empty package name.
        base_port: Lowest assignable port, within [1024, 65535].
        range_size: Number of candidate ports, within [1, 10000].
        hash_name: Hash strategy; unknown names fall back to ``twin``.
        reducer_name: Reducer strategy; unknown names fall back to ``knuth``.

    Returns:
        A port in ``[base_port, base_port + range_size)``.

    Raises:
        InvalidIdentifier, InvalidBasePort, InvalidRange: on bad input.
        ImplementationInvariantViolated: if a strategy produced an out-of-range offset.
    """
    return _DEFAULT_ASSIGNER.assign(identifier, base_port, range_size, hash_name, reducer_name)
