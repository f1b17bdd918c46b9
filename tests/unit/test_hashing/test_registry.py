"""
Unit tests for the strategy lookup tables.
"""
# 说明：StrategyTable 及内置哈希/归约策略表的单元测试。
# 覆盖：
# - 内置表的名称与枚举顺序
# - 未知名称、None 与枚举成员的解析行为
# - 自定义表的构造校验与只读性

import pytest

from portico.core.utils.param_validation import ParamValidationError
from portico.hashing import (
    HASH_FUNCTIONS,
    REDUCERS,
    HashName,
    ReducerName,
    StrategyTable,
    build_reducer_table,
    knuth,
    registered_strategies_snapshot,
    sdbm,
    twin,
)


def test_builtin_tables_list_every_strategy_in_order():
    assert list(HASH_FUNCTIONS) == ["sdbm", "safe", "twin", "cascade", "double"]
    assert list(REDUCERS) == ["modulo", "knuth", "lcg"]
    assert len(HASH_FUNCTIONS) * len(REDUCERS) == 15


def test_resolve_known_name():
    name, fn = HASH_FUNCTIONS.resolve("sdbm")
    assert name == "sdbm"
    assert fn is sdbm


def test_resolve_enum_member():
    name, fn = REDUCERS.resolve(ReducerName.KNUTH)
    assert name == "knuth"
    assert fn is knuth
    assert HASH_FUNCTIONS.resolve(HashName.SDBM)[0] == "sdbm"


@pytest.mark.parametrize("name", ["bogus", "", None, "TWIN", 42])
def test_resolve_unknown_falls_back_to_default(name):
    resolved, fn = HASH_FUNCTIONS.resolve(name)
    assert resolved == "twin"
    assert fn is twin


def test_custom_table_requires_default_entry():
    with pytest.raises(ParamValidationError):
        StrategyTable({"a": knuth}, default="b")
    with pytest.raises(ParamValidationError):
        StrategyTable({}, default="a")


def test_custom_table_is_read_only():
    table = build_reducer_table({"knuth": knuth})
    with pytest.raises(TypeError):
        table["other"] = knuth  # type: ignore[index]
    assert table.default == "knuth"


def test_snapshot_lists_names():
    snapshot = registered_strategies_snapshot()
    assert snapshot["hash"][2] == "twin"
    assert snapshot["reducer"] == ("modulo", "knuth", "lcg")
