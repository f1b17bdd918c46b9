"""
Registry of available examples.
"""
from typing import List, TypedDict


class ExampleMetadata(TypedDict):
    path: str
    tags: List[str]
    slow: bool
    description: str


EXAMPLES: List[ExampleMetadata] = [
    # --- Basic ---
    {
        "path": "basic/00_generate_port.py",
        "tags": ["basic", "p0"],
        "slow": False,
        "description": "Default and explicit strategies, and reading the name from package.json."
    },
    {
        "path": "basic/01_team_config.py",
        "tags": ["basic", "p0"],
        "slow": False,
        "description": "Per-framework port windows for a team of microfrontends."
    },

    # --- Analysis ---
    {
        "path": "analysis/10_import_map_collisions.py",
        "tags": ["analysis", "p0"],
        "slow": False,
        "description": "Collision analysis of an import map with table, CSV and JSON output."
    },
    {
        "path": "analysis/11_strategy_benchmark.py",
        "tags": ["analysis", "benchmark"],
        "slow": False,
        "description": "All fifteen hash + reducer combinations ranked on one import map."
    },
    {
        "path": "analysis/12_strategy_tournament.py",
        "tags": ["analysis", "benchmark"],
        "slow": True,
        "description": "Points-based tournament over three import maps and nine port ranges."
    },
    {
        "path": "analysis/13_custom_strategy.py",
        "tags": ["analysis", "extension"],
        "slow": False,
        "description": "Ranking an experimental hash against the built-in strategies."
    },
]
