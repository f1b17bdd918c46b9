"""Collision analysis, strategy benchmarking and tournaments."""

from .collision import (
    CollisionAnalyzer,
    PortAnalysis,
    analyze,
    normalize_identifiers,
)
from .distribution import (
    DistributionStats,
    birthday_collision_probability,
    occupancy_counts,
    occupancy_stats,
)
from .benchmark import (
    BenchmarkReport,
    StrategyBenchmark,
    StrategyFailure,
    StrategyResult,
    benchmark,
    rank_results,
)
from .tournament import (
    DEFAULT_TOURNAMENT_RANGES,
    POINTS_SCALE,
    StrategyStanding,
    StrategyTournament,
    TournamentStandings,
    assign_round_points,
    run_tournament,
    tie_groups,
)

__all__ = [
    "CollisionAnalyzer",
    "PortAnalysis",
    "analyze",
    "normalize_identifiers",
    "DistributionStats",
    "birthday_collision_probability",
    "occupancy_counts",
    "occupancy_stats",
    "BenchmarkReport",
    "StrategyBenchmark",
    "StrategyFailure",
    "StrategyResult",
    "benchmark",
    "rank_results",
    "DEFAULT_TOURNAMENT_RANGES",
    "POINTS_SCALE",
    "StrategyStanding",
    "StrategyTournament",
    "TournamentStandings",
    "assign_round_points",
    "run_tournament",
    "tie_groups",
]
