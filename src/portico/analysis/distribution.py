"""
Occupancy statistics for a port analysis.

Responsibilities
  - Summarise how evenly identifiers spread over the port range.
  - Compare observed occupancy against a uniform random assignment.

Usage Context
  - Attached to benchmark results as informational columns.

Limitations
  - Statistics are descriptive; they do not influence strategy ranking.
"""
# 说明：基于 numpy 的端口占用分布统计，用于描述某一策略在端口区间内的分散程度。
# 职责：
# - occupancy_counts：将端口映射为偏移并用 bincount 统计每个端口的占用数
# - occupancy_stats：汇总利用率、最大负载、卡方统计量与均匀随机下的期望唯一端口数
# - birthday_collision_probability：生日悖论近似下至少一次碰撞的概率

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

import numpy as np

from portico.core.utils.param_validation import ensure

from .collision import PortAnalysis


def birthday_collision_probability(identifier_count: int, range_size: int) -> float:
    """Approximate chance of any collision: ``1 - exp(-n**2 / (2 * range))``."""
    ensure(range_size >= 1, "range_size must be positive")
    n = float(identifier_count)
    return float(1.0 - np.exp(-(n * n) / (2.0 * range_size)))


@dataclass(frozen=True)
class DistributionStats:
    # 端口占用分布摘要
    identifier_count: int
    range_size: int
    unique_ports: int
    utilization: float          # 已占用端口数 / 端口区间大小
    max_load: int               # 单个端口上的最大标识符数量
    mean_occupied_load: float   # 已占用端口上的平均标识符数量
    chi_square: float           # 相对均匀分布的卡方统计量
    expected_unique: float      # 均匀随机分配下的期望唯一端口数

    def to_dict(self) -> Dict[str, Any]:
        return {
            "identifier_count": int(self.identifier_count),
            "range_size": int(self.range_size),
            "unique_ports": int(self.unique_ports),
            "utilization": float(self.utilization),
            "max_load": int(self.max_load),
            "mean_occupied_load": float(self.mean_occupied_load),
            "chi_square": float(self.chi_square),
            "expected_unique": float(self.expected_unique),
        }


def occupancy_counts(analysis: PortAnalysis, base_port: int, range_size: int) -> np.ndarray:
    """Return an array of length ``range_size`` with the identifier count per port."""
    offsets = np.fromiter(
        (port - base_port for port in analysis.entries.values()),
        dtype=np.int64,
        count=len(analysis.entries),
    )
    ensure(
        bool(np.all((offsets >= 0) & (offsets < range_size))),
        "analysis contains ports outside the requested range",
    )
    return np.bincount(offsets, minlength=range_size)


def occupancy_stats(analysis: PortAnalysis, base_port: int, range_size: int) -> DistributionStats:
    """Describe the port occupancy of ``analysis``."""
    counts = occupancy_counts(analysis, base_port, range_size)
    n = int(counts.sum())
    occupied = counts[counts > 0]
    if n == 0:
        return DistributionStats(
            identifier_count=0,
            range_size=range_size,
            unique_ports=0,
            utilization=0.0,
            max_load=0,
            mean_occupied_load=0.0,
            chi_square=0.0,
            expected_unique=0.0,
        )
    expected = n / range_size
    chi_square = float(np.sum((counts - expected) ** 2) / expected)
    # 均匀随机分配时某端口至少被占用一次的概率为 1 - (1 - 1/range)^n
    expected_unique = float(range_size * (1.0 - np.power(1.0 - 1.0 / range_size, n)))
    return DistributionStats(
        identifier_count=n,
        range_size=range_size,
        unique_ports=int(occupied.size),
        utilization=float(occupied.size / range_size),
        max_load=int(counts.max()),
        mean_occupied_load=float(occupied.mean()),
        chi_square=chi_square,
        expected_unique=expected_unique,
    )
