"""
Collision analysis over a set of identifiers.

Responsibilities
  - Assign a port to every identifier with one hash/reducer strategy.
  - Build the forward map (identifier -> port) and the inverse grouping
    (port -> identifiers in encounter order).
  - Expose collision groups and summary counts.

Usage Context
  - Use with the keys of an import map to preview port clashes.
  - The strategy benchmark runs one analysis per combination.

Limitations
  - Duplicate identifiers are processed once, at their first position.
"""
# 说明：对一组标识符计算端口分配，并按端口反向分组以暴露碰撞。
# 职责：
# - normalize_identifiers：校验输入集合形态（映射或非字符串可迭代对象）并按首次出现去重
# - PortAnalysis：承载 entries / ports 两张表及碰撞统计派生属性
# - CollisionAnalyzer / analyze：逐个调用 PortAssigner，同步构建正向映射与反向分组
# 约定：
# - 所有分组列表长度之和等于去重后的标识符数量，不丢失、不重复计数

from __future__ import annotations

from collections.abc import Iterable as IterableABC
from collections.abc import Mapping as MappingABC
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from portico.assignment.port_assigner import PortAssigner
from portico.core.errors import MalformedInput
from portico.core.utils.config import (
    DEFAULT_BASE_PORT,
    DEFAULT_HASH,
    DEFAULT_RANGE,
    DEFAULT_REDUCER,
)
from portico.hashing.registry import StrategyKey, StrategyTable


def normalize_identifiers(identifiers: Any) -> List[str]:
    """
    Return the identifiers of ``identifiers`` in order, without duplicates.

    Accepts a mapping (its keys are used, e.g. an import map's ``imports``) or
    any non-string iterable. Raises ``MalformedInput`` for ``None``, a bare
    string, or a non-iterable value.
    """
    if identifiers is None:
        raise MalformedInput("identifier collection is missing")
    if isinstance(identifiers, (str, bytes, bytearray)):
        raise MalformedInput("identifier collection must be a mapping or a collection of names, not a string")
    if isinstance(identifiers, MappingABC):
        keys = list(identifiers.keys())
    elif isinstance(identifiers, IterableABC):
        keys = list(identifiers)
    else:
        raise MalformedInput(
            f"identifier collection must be a mapping or a collection of names, got {type(identifiers).__name__}"
        )
    # dict.fromkeys 保留首次出现顺序并去重
    try:
        return list(dict.fromkeys(keys))
    except TypeError as exc:
        raise MalformedInput("identifiers must be hashable names") from exc


@dataclass
class PortAnalysis:
    # 一次分析的结果：entries 为标识符到端口的映射，ports 为端口到标识符列表的分组
    entries: Dict[str, int] = field(default_factory=dict)
    ports: Dict[int, List[str]] = field(default_factory=dict)

    @property
    def collision_groups(self) -> Dict[int, List[str]]:
        return {port: names for port, names in self.ports.items() if len(names) > 1}

    @property
    def collision_count(self) -> int:
        """Identifiers sharing a port with at least one other identifier."""
        return sum(len(names) for names in self.ports.values() if len(names) > 1)

    @property
    def collision_group_count(self) -> int:
        return len(self.collision_groups)

    @property
    def unique_port_count(self) -> int:
        return len(self.ports)

    @property
    def identifier_count(self) -> int:
        return len(self.entries)

    def collisions_for(self, identifier: str) -> List[str]:
        """Other identifiers assigned the same port as ``identifier``."""
        port = self.entries[identifier]
        return [name for name in self.ports[port] if name != identifier]

    def to_dict(self) -> Dict[str, Any]:
        # JSON 对象的键只能是字符串，端口号在导出时转换为字符串
        return {
            "entries": dict(self.entries),
            "ports": {str(port): list(names) for port, names in self.ports.items()},
        }


class CollisionAnalyzer:
    """Run a :class:`PortAssigner` over an identifier collection."""

    def __init__(
        self,
        hashes: Optional[StrategyTable] = None,
        reducers: Optional[StrategyTable] = None,
    ) -> None:
        self.assigner = PortAssigner(hashes, reducers)

    def analyze(
        self,
        identifiers: Any,
        base_port: int = DEFAULT_BASE_PORT,
        range_size: int = DEFAULT_RANGE,
        hash_name: StrategyKey = DEFAULT_HASH,
        reducer_name: StrategyKey = DEFAULT_REDUCER,
    ) -> PortAnalysis:
        names = normalize_identifiers(identifiers)
        entries: Dict[str, int] = {}
        ports: Dict[int, List[str]] = {}
        for name in names:
            # 任一标识符失败即整体失败，不返回部分结果
            port = self.assigner.assign(name, base_port, range_size, hash_name, reducer_name)
            entries[name] = port
            ports.setdefault(port, []).append(name)
        return PortAnalysis(entries=entries, ports=ports)


def analyze(
    identifiers: Any,
    base_port: int = DEFAULT_BASE_PORT,
    range_size: int = DEFAULT_RANGE,
    hash_name: StrategyKey = DEFAULT_HASH,
    reducer_name: StrategyKey = DEFAULT_REDUCER,
) -> PortAnalysis:
    """Assign ports to every identifier and group them by port."""
    return CollisionAnalyzer().analyze(identifiers, base_port, range_size, hash_name, reducer_name)
