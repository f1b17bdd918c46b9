"""
Synthetic import-map generation for examples.
"""
from typing import Dict, List, Optional

import numpy as np

SCOPES = ["", "@company/", "@shared/", "@platform/", "@mfe/", "@design/"]
STEMS = [
    "shell", "auth", "dashboard", "profile", "settings", "billing", "search",
    "checkout", "catalog", "orders", "cart", "inventory", "reports", "admin",
    "ui", "api", "utils", "store", "router", "forms", "charts", "i18n",
    "analytics", "notifications", "payments", "users", "media", "chat",
]
SUFFIXES = ["", "-app", "-core", "-widgets", "-service", "-legacy", "-next"]

# 与基准脚本中使用的三档规模一致
SIZES = {"medium": 73, "large": 133, "xl": 287}


def build_package_names(count: int, rng: Optional[np.random.Generator] = None) -> List[str]:
    """
    Generate ``count`` distinct, realistic-looking package names.

    Args:
        count: Number of names.
        rng: Random number generator (a fresh default generator if omitted).

    Returns:
        Names in generation order.
    """
    if rng is None:
        rng = np.random.default_rng()
    capacity = len(SCOPES) * len(STEMS) * len(SUFFIXES)
    if count > capacity:
        raise ValueError(f"at most {capacity} distinct names can be generated")

    names: Dict[str, None] = {}
    while len(names) < count:
        scope = SCOPES[int(rng.integers(len(SCOPES)))]
        stem = STEMS[int(rng.integers(len(STEMS)))]
        suffix = SUFFIXES[int(rng.integers(len(SUFFIXES)))]
        names.setdefault(f"{scope}{stem}{suffix}", None)
    return list(names)


def build_import_map(count: int, rng: Optional[np.random.Generator] = None) -> Dict[str, str]:
    """Build an ``imports`` object mapping each generated name to a CDN URL."""
    return {name: f"https://cdn.example.com/{name}/index.js" for name in build_package_names(count, rng)}


def build_import_map_suite(seed: int, quick: bool = False) -> Dict[str, Dict[str, str]]:
    """Build the medium / large / xl import maps (a single small map in quick mode)."""
    rng = np.random.default_rng(seed)
    if quick:
        return {"small": build_import_map(30, rng)}
    return {label: build_import_map(size, rng) for label, size in SIZES.items()}
