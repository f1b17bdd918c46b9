"""
Closed, injectable lookup tables for hash and reducer strategies.

Mirrors the mechanism registry style: normalise identifiers, expose lookup
helpers, and resolve unknown names to a table default instead of failing.
"""
# 说明：哈希函数与归约函数的轻量级注册表，按名称查找并在未知名称时回退到默认项。
# 职责：
# - HashName / ReducerName：内置策略名称枚举，支持以枚举或字符串形式指定
# - StrategyTable：只读映射，提供 resolve(...) 的“带默认值查找”语义
# - HASH_FUNCTIONS / REDUCERS：内置的 5 种哈希与 3 种归约策略表
# - build_hash_table / build_reducer_table：构造可注入的自定义策略表（用于测试与扩展）
# 约定：
# - 名称匹配区分大小写；未知名称静默回退，不视为错误

from __future__ import annotations

import enum
from types import MappingProxyType
from typing import Callable, Dict, Iterator, Mapping, Optional, Tuple, Union

from portico.core.utils.param_validation import ParamValidationError

from . import hash_functions, reducers
from .hash_functions import HashFunction
from .reducers import ReducerFunction


class HashName(enum.Enum):
    """Built-in hash function identifiers."""

    SDBM = "sdbm"
    SAFE = "safe"
    TWIN = "twin"
    CASCADE = "cascade"
    DOUBLE = "double"


class ReducerName(enum.Enum):
    """Built-in reducer identifiers."""

    MODULO = "modulo"
    KNUTH = "knuth"
    LCG = "lcg"


StrategyKey = Union[str, enum.Enum, None]


def normalize_name(name: StrategyKey) -> Optional[str]:
    """Return the plain string key for ``name`` (enum members map to their value)."""
    # 枚举取其 value；None 保持 None，交由 resolve 回退到默认项
    if isinstance(name, enum.Enum):
        return str(name.value)
    if name is None:
        return None
    return name if isinstance(name, str) else str(name)


class StrategyTable(Mapping[str, Callable]):
    """
    Read-only name -> function table with a designated default entry.

    - Configuration
      - entries: Ordered mapping of strategy names to callables.
      - default: Name of the entry used when a lookup misses.

    - Behavior
      - Iteration follows insertion order, which fixes benchmark enumeration.
      - ``resolve`` never raises for unknown names.

    - Usage Notes
      - Build custom tables to inject faulty or experimental strategies.
    """

    def __init__(self, entries: Mapping[str, Callable], default: str, *, kind: str = "strategy") -> None:
        if not entries:
            raise ParamValidationError(f"{kind} table must not be empty")
        if default not in entries:
            raise ParamValidationError(f"default {kind} '{default}' is not in the table")
        self._entries: Mapping[str, Callable] = MappingProxyType(dict(entries))
        self.default = default
        self.kind = kind

    def __getitem__(self, name: str) -> Callable:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"StrategyTable(kind={self.kind!r}, names={list(self._entries)!r}, default={self.default!r})"

    def resolve(self, name: StrategyKey) -> Tuple[str, Callable]:
        """Return ``(resolved_name, function)``, falling back to the default."""
        key = normalize_name(name)
        if key is not None and key in self._entries:
            return key, self._entries[key]
        return self.default, self._entries[self.default]

    def names(self) -> Tuple[str, ...]:
        return tuple(self._entries)


def build_hash_table(entries: Mapping[str, HashFunction], default: str = HashName.TWIN.value) -> StrategyTable:
    """Create a hash table, e.g. the built-ins plus an experimental function."""
    return StrategyTable(entries, default, kind="hash")


def build_reducer_table(entries: Mapping[str, ReducerFunction], default: str = ReducerName.KNUTH.value) -> StrategyTable:
    """Create a reducer table, e.g. the built-ins plus a custom reducer."""
    return StrategyTable(entries, default, kind="reducer")


# 内置哈希策略表，顺序即基准测试的枚举顺序
_BUILTIN_HASHES: Dict[str, HashFunction] = {
    HashName.SDBM.value: hash_functions.sdbm,
    HashName.SAFE.value: hash_functions.safe,
    HashName.TWIN.value: hash_functions.twin,
    HashName.CASCADE.value: hash_functions.cascade,
    HashName.DOUBLE.value: hash_functions.double,
}

_BUILTIN_REDUCERS: Dict[str, ReducerFunction] = {
    ReducerName.MODULO.value: reducers.modulo,
    ReducerName.KNUTH.value: reducers.knuth,
    ReducerName.LCG.value: reducers.lcg,
}

HASH_FUNCTIONS = build_hash_table(_BUILTIN_HASHES)
REDUCERS = build_reducer_table(_BUILTIN_REDUCERS)


def registered_strategies_snapshot() -> Dict[str, Tuple[str, ...]]:
    """Snapshot of the built-in strategy names for tooling or docs."""
    return {"hash": HASH_FUNCTIONS.names(), "reducer": REDUCERS.names()}
