"""
portico: stable development ports derived from package names.

Maps a package name to a deterministic port in a configurable range and
benchmarks hash/reducer strategies for collision behaviour.
"""

from __future__ import annotations

from .analysis import (
    BenchmarkReport,
    CollisionAnalyzer,
    PortAnalysis,
    StrategyBenchmark,
    StrategyResult,
    StrategyTournament,
    analyze,
    benchmark,
    run_tournament,
)
from .assignment import PortAssigner, compute_port
from .core.errors import (
    ImplementationInvariantViolated,
    InvalidBasePort,
    InvalidIdentifier,
    InvalidRange,
    MalformedInput,
    PorticoError,
    SourceError,
)
from .hashing import HASH_FUNCTIONS, REDUCERS, HashName, ReducerName, StrategyTable
from .io import analyze_import_map, get_port_from_package_json, load_import_map, read_package_name

__version__ = "1.0.0"

__all__ = [
    "BenchmarkReport",
    "CollisionAnalyzer",
    "PortAnalysis",
    "StrategyBenchmark",
    "StrategyResult",
    "StrategyTournament",
    "analyze",
    "benchmark",
    "run_tournament",
    "PortAssigner",
    "compute_port",
    "ImplementationInvariantViolated",
    "InvalidBasePort",
    "InvalidIdentifier",
    "InvalidRange",
    "MalformedInput",
    "PorticoError",
    "SourceError",
    "HASH_FUNCTIONS",
    "REDUCERS",
    "HashName",
    "ReducerName",
    "StrategyTable",
    "analyze_import_map",
    "get_port_from_package_json",
    "load_import_map",
    "read_package_name",
    "__version__",
]
