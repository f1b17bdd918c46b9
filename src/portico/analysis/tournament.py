"""
Multi-round strategy tournament.

Runs the strategy benchmark for every (identifier set, range) round and
awards points by rank, so strategies can be compared across import maps of
different sizes and across several port ranges at once.
"""
# 说明：在多个标识符集合 × 多个端口范围上重复运行基准测试，按名次计分并汇总总排名。
# 职责：
# - assign_round_points：将单轮排序结果划分为并列组，计算竞赛名次与组内平均分
# - StrategyStanding：某策略的累计积分、名次列表、前三/后三次数与逐轮明细
# - StrategyTournament / run_tournament：逐轮执行并隔离单轮失败，输出按积分降序的排名
# 约定：
# - 并列判定依据 collisions 与 unique_ports 同时相等
# - 名次 r 的得分取 POINTS_SCALE[r - 1]，超出分值表的名次得 0 分

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from portico.core.utils.config import DEFAULT_BASE_PORT
from portico.core.utils.logging import get_logger
from portico.core.utils.param_validation import ensure
from portico.hashing.registry import StrategyTable

from .benchmark import StrategyBenchmark, StrategyResult

logger = get_logger(__name__)

POINTS_SCALE: Tuple[int, ...] = (10, 8, 6, 4, 2, 0, -2, -4, -6, -8, -10, -12, -14, -16, -15)

DEFAULT_TOURNAMENT_RANGES: Tuple[int, ...] = (787, 991, 997, 1000, 1009, 1997, 2000, 2971, 3000)


@dataclass
class RoundPlacement:
    # 某策略在单轮中的名次与得分
    label: str
    range_size: int
    rank: int
    collisions: int
    unique_ports: int
    points: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "label": self.label,
            "range_size": self.range_size,
            "rank": self.rank,
            "collisions": self.collisions,
            "unique_ports": self.unique_ports,
            "points": self.points,
        }


@dataclass
class StrategyStanding:
    strategy: str
    points: float = 0.0
    ranks: List[int] = field(default_factory=list)
    top_three_count: int = 0
    bottom_three_count: int = 0
    details: List[RoundPlacement] = field(default_factory=list)

    @property
    def average_rank(self) -> float:
        return sum(self.ranks) / len(self.ranks) if self.ranks else 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "strategy": self.strategy,
            "points": round(self.points, 2),
            "average_rank": round(self.average_rank, 2),
            "top_three_count": self.top_three_count,
            "bottom_three_count": self.bottom_three_count,
            "details": [d.to_dict() for d in self.details],
        }


def _points_for_rank(rank: int) -> int:
    return POINTS_SCALE[rank - 1] if 1 <= rank <= len(POINTS_SCALE) else 0


def tie_groups(results: Sequence[StrategyResult]) -> List[List[StrategyResult]]:
    """Split ranked results into consecutive groups of equal performance."""
    groups: List[List[StrategyResult]] = []
    for result in results:
        if groups and (groups[-1][-1].collisions, groups[-1][-1].unique_ports) == (
            result.collisions,
            result.unique_ports,
        ):
            groups[-1].append(result)
        else:
            groups.append([result])
    return groups


def assign_round_points(results: Sequence[StrategyResult]) -> List[Tuple[StrategyResult, int, float]]:
    """
    Return ``(result, rank, points)`` for each ranked result.

    Tied results share the first rank of their group and the average of the
    points for the positions the group occupies, rounded to two decimals.
    """
    placements: List[Tuple[StrategyResult, int, float]] = []
    current_rank = 1
    for group in tie_groups(results):
        positions = range(current_rank, current_rank + len(group))
        avg_points = sum(_points_for_rank(p) for p in positions) / len(group)
        points = round(avg_points, 2)
        for result in group:
            placements.append((result, current_rank, points))
        current_rank += len(group)
    return placements


@dataclass
class TournamentStandings:
    rounds: int = 0
    standings: List[StrategyStanding] = field(default_factory=list)
    failed_rounds: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def champion(self) -> Optional[StrategyStanding]:
        return self.standings[0] if self.standings else None

    @property
    def point_spread(self) -> float:
        if not self.standings:
            return 0.0
        return self.standings[0].points - self.standings[-1].points

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rounds": self.rounds,
            "standings": [s.to_dict() for s in self.standings],
            "failed_rounds": list(self.failed_rounds),
        }


class StrategyTournament:
    """Aggregate benchmark rankings over several identifier sets and ranges."""

    def __init__(
        self,
        hashes: Optional[StrategyTable] = None,
        reducers: Optional[StrategyTable] = None,
    ) -> None:
        self.bench = StrategyBenchmark(hashes, reducers)

    def run(
        self,
        identifier_sets: Mapping[str, Any],
        ranges: Iterable[int] = DEFAULT_TOURNAMENT_RANGES,
        base_port: int = DEFAULT_BASE_PORT,
    ) -> TournamentStandings:
        range_list = list(ranges)
        ensure(len(identifier_sets) > 0, "at least one identifier set is required")
        ensure(len(range_list) > 0, "at least one range is required")

        by_strategy: Dict[str, StrategyStanding] = {}
        outcome = TournamentStandings()
        for label, identifiers in identifier_sets.items():
            for range_size in range_list:
                try:
                    report = self.bench.run(identifiers, base_port, range_size)
                except Exception as exc:
                    # 单轮失败（例如范围越界）只记录并跳过，不中断整个锦标赛
                    logger.warning("failed to benchmark %s with range %s: %s", label, range_size, exc)
                    outcome.failed_rounds.append({"label": label, "range_size": range_size, "message": str(exc)})
                    continue
                outcome.rounds += 1
                total = len(report.results)
                for result, rank, points in assign_round_points(report.results):
                    standing = by_strategy.setdefault(result.strategy, StrategyStanding(result.strategy))
                    standing.points += points
                    standing.ranks.append(rank)
                    if rank <= 3:
                        standing.top_three_count += 1
                    # 名次为竞赛名次：并列组共享组内首个名次，因此整组要么都计入后三，要么都不计入
                    if rank >= total - 2:
                        standing.bottom_three_count += 1
                    standing.details.append(
                        RoundPlacement(
                            label=label,
                            range_size=range_size,
                            rank=rank,
                            collisions=result.collisions,
                            unique_ports=result.unique_ports,
                            points=points,
                        )
                    )
                logger.info(
                    "round %s (range=%d): best %s",
                    label,
                    range_size,
                    report.best.strategy if report.best else "-",
                )

        outcome.standings = sorted(by_strategy.values(), key=lambda s: -s.points)
        return outcome


def run_tournament(
    identifier_sets: Mapping[str, Any],
    ranges: Iterable[int] = DEFAULT_TOURNAMENT_RANGES,
    base_port: int = DEFAULT_BASE_PORT,
) -> TournamentStandings:
    """Run the built-in strategies through every (identifier set, range) round."""
    return StrategyTournament().run(identifier_sets, ranges, base_port)
