"""
Strategy benchmark across every hash/reducer combination.

Responsibilities
  - Run one collision analysis per (hash, reducer) pair in table order.
  - Rank combinations by collisions (ascending) then unique ports (descending).
  - Isolate per-combination failures so one faulty strategy does not abort
    the comparison.
  - Report the birthday-paradox collision probability for reference.

Usage Context
  - Use to choose a strategy for a given import map and port range.
  - The tournament aggregates many benchmark runs.

Limitations
  - Timing columns are informational and vary between runs.
"""
# 说明：对所有 哈希 × 归约 组合逐一运行碰撞分析并排序，选出最优/最差组合。
# 职责：
# - StrategyResult / StrategyFailure：单个组合的结果或失败记录
# - BenchmarkReport：排序后的结果、失败列表、生日悖论概率与最优/最差组合
# - StrategyBenchmark：持有可注入的策略表，顺序执行各组合并隔离单组合失败
# - benchmark(...)：返回排序后结果列表的便捷入口
# 约定：
# - 参数错误（标识符集合形态、空标识符、端口、范围）在开始前统一校验并直接抛出

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from portico.assignment.port_assigner import validate_bounds, validate_identifier
from portico.core.utils.config import DEFAULT_BASE_PORT, DEFAULT_RANGE
from portico.core.utils.logging import get_logger
from portico.core.utils.performance import Timer
from portico.hashing.registry import HASH_FUNCTIONS, REDUCERS, StrategyTable

from .collision import CollisionAnalyzer, normalize_identifiers
from .distribution import birthday_collision_probability, occupancy_stats

logger = get_logger(__name__)


@dataclass
class StrategyResult:
    # 单个 哈希+归约 组合的基准结果；排序与相等比较只看前四个字段
    hash_name: str
    reducer_name: str
    collisions: int
    unique_ports: int
    utilization: float = field(default=0.0, compare=False)
    max_load: int = field(default=0, compare=False)
    elapsed_seconds: float = field(default=0.0, compare=False)

    @property
    def strategy(self) -> str:
        return f"{self.hash_name}+{self.reducer_name}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hash": self.hash_name,
            "reducer": self.reducer_name,
            "collisions": int(self.collisions),
            "unique_ports": int(self.unique_ports),
            "utilization": float(self.utilization),
            "max_load": int(self.max_load),
        }


@dataclass
class StrategyFailure:
    hash_name: str
    reducer_name: str
    error_type: str
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hash": self.hash_name,
            "reducer": self.reducer_name,
            "error_type": self.error_type,
            "message": self.message,
        }


def rank_results(results: List[StrategyResult]) -> List[StrategyResult]:
    """Sort by collisions ascending, then unique ports descending; stable otherwise."""
    return sorted(results, key=lambda r: (r.collisions, -r.unique_ports))


@dataclass
class BenchmarkReport:
    # 一次基准测试的完整报告
    identifier_count: int
    base_port: int
    range_size: int
    collision_probability: float
    results: List[StrategyResult] = field(default_factory=list)
    failures: List[StrategyFailure] = field(default_factory=list)

    @property
    def best(self) -> Optional[StrategyResult]:
        return self.results[0] if self.results else None

    @property
    def worst(self) -> Optional[StrategyResult]:
        # 只有一个结果时不存在“最差”组合
        return self.results[-1] if len(self.results) > 1 else None

    @property
    def strategies_with_collisions(self) -> int:
        return sum(1 for r in self.results if r.collisions > 0)

    def summary(self) -> Optional[Dict[str, Any]]:
        if not self.results:
            return None
        worst = self.worst
        return {
            "best_combination": self.results[0].to_dict(),
            "worst_combination": worst.to_dict() if worst is not None else None,
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "identifier_count": self.identifier_count,
            "base_port": self.base_port,
            "range_size": self.range_size,
            "total_combinations": len(self.results),
            "collision_probability": float(self.collision_probability),
            "results": [r.to_dict() for r in self.results],
            "failures": [f.to_dict() for f in self.failures],
            "summary": self.summary(),
        }


class StrategyBenchmark:
    """
    Compare every hash/reducer combination over one identifier set.

    - Configuration
      - hashes / reducers: Strategy tables enumerated in order.

    - Behavior
      - Runs combinations sequentially so the ranking is deterministic.
      - Logs and records failing combinations instead of raising.

    - Usage Notes
      - Inject tables containing custom strategies to evaluate them against
        the built-ins.
    """

    def __init__(
        self,
        hashes: Optional[StrategyTable] = None,
        reducers: Optional[StrategyTable] = None,
    ) -> None:
        self.hashes = HASH_FUNCTIONS if hashes is None else hashes
        self.reducers = REDUCERS if reducers is None else reducers
        self.analyzer = CollisionAnalyzer(self.hashes, self.reducers)

    def run(
        self,
        identifiers: Any,
        base_port: int = DEFAULT_BASE_PORT,
        range_size: int = DEFAULT_RANGE,
    ) -> BenchmarkReport:
        names = normalize_identifiers(identifiers)
        # 这些错误会让每一个组合都失败，提前抛出而不是记录 15 次
        for name in names:
            validate_identifier(name)
        validate_bounds(base_port, range_size)

        results: List[StrategyResult] = []
        failures: List[StrategyFailure] = []
        for hash_name in self.hashes:
            for reducer_name in self.reducers:
                try:
                    with Timer() as timer:
                        analysis = self.analyzer.analyze(names, base_port, range_size, hash_name, reducer_name)
                    stats = occupancy_stats(analysis, base_port, range_size)
                except Exception as exc:
                    logger.warning("failed to test %s+%s: %s", hash_name, reducer_name, exc)
                    failures.append(StrategyFailure(hash_name, reducer_name, type(exc).__name__, str(exc)))
                    continue
                results.append(
                    StrategyResult(
                        hash_name=hash_name,
                        reducer_name=reducer_name,
                        collisions=analysis.collision_count,
                        unique_ports=analysis.unique_port_count,
                        utilization=stats.utilization,
                        max_load=stats.max_load,
                        elapsed_seconds=timer.elapsed,
                    )
                )

        report = BenchmarkReport(
            identifier_count=len(names),
            base_port=base_port,
            range_size=range_size,
            collision_probability=birthday_collision_probability(len(names), range_size),
            results=rank_results(results),
            failures=failures,
        )
        if report.best is not None:
            logger.debug(
                "benchmarked %d combinations over %d identifiers; best %s (%d collisions)",
                len(report.results),
                report.identifier_count,
                report.best.strategy,
                report.best.collisions,
                extra={"identifiers": names},
            )
        return report


def benchmark(
    identifiers: Any,
    base_port: int = DEFAULT_BASE_PORT,
    range_size: int = DEFAULT_RANGE,
) -> List[StrategyResult]:
    """Return every built-in combination's result, best first."""
    return StrategyBenchmark().run(identifiers, base_port, range_size).results
