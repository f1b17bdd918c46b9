"""Hash functions, reducers and the strategy tables that name them."""

from .hash_functions import (
    MASK32,
    HashFunction,
    cascade,
    code_units,
    double,
    prime_mix,
    safe,
    sdbm,
    twin,
)
from .reducers import (
    ReducerFunction,
    knuth,
    lcg,
    modulo,
)
from .registry import (
    HASH_FUNCTIONS,
    REDUCERS,
    HashName,
    ReducerName,
    StrategyTable,
    build_hash_table,
    build_reducer_table,
    normalize_name,
    registered_strategies_snapshot,
)

__all__ = [
    "MASK32",
    "HashFunction",
    "ReducerFunction",
    "cascade",
    "code_units",
    "double",
    "prime_mix",
    "safe",
    "sdbm",
    "twin",
    "knuth",
    "lcg",
    "modulo",
    "HASH_FUNCTIONS",
    "REDUCERS",
    "HashName",
    "ReducerName",
    "StrategyTable",
    "build_hash_table",
    "build_reducer_table",
    "normalize_name",
    "registered_strategies_snapshot",
]
