"""
Property-based tests for collision analysis and benchmarking.
"""
# 说明：碰撞分析与策略基准的属性测试。
# 覆盖：
# - 分组列表长度之和等于去重后的标识符数量
# - 每个分组中的标识符在 entries 中映射到该分组的端口
# - 基准结果覆盖全部组合且排序键单调
# - 碰撞数与唯一端口数之间的基本关系

from hypothesis import given, settings, strategies as st

from portico.analysis import StrategyBenchmark, analyze
from portico.hashing import HASH_FUNCTIONS, REDUCERS

identifier_lists = st.lists(st.text(min_size=1, max_size=30), max_size=40)
range_sizes = st.integers(min_value=1, max_value=200)
hash_names = st.sampled_from(list(HASH_FUNCTIONS))
reducer_names = st.sampled_from(list(REDUCERS))


@given(identifier_lists, range_sizes, hash_names, reducer_names)
def test_groups_partition_identifiers(names, range_size, hash_name, reducer_name):
    result = analyze(names, 3001, range_size, hash_name, reducer_name)
    distinct = list(dict.fromkeys(names))
    assert sum(len(group) for group in result.ports.values()) == len(distinct)
    assert list(result.entries) == distinct
    for port, group in result.ports.items():
        assert 3001 <= port < 3001 + range_size
        for name in group:
            assert result.entries[name] == port


@given(identifier_lists, range_sizes)
def test_collision_counts_are_consistent(names, range_size):
    result = analyze(names, 3001, range_size)
    n = result.identifier_count
    assert result.unique_port_count <= min(n, range_size)
    # 没有碰撞当且仅当唯一端口数等于标识符数量
    assert (result.collision_count == 0) == (result.unique_port_count == n)
    assert result.collision_count >= 2 * result.collision_group_count


@settings(max_examples=30)
@given(st.lists(st.text(min_size=1, max_size=20), max_size=25), range_sizes)
def test_benchmark_covers_all_combinations_in_order(names, range_size):
    report = StrategyBenchmark().run(names, 3001, range_size)
    assert len(report.results) == len(HASH_FUNCTIONS) * len(REDUCERS)
    assert report.failures == []
    keys = [(r.collisions, -r.unique_ports) for r in report.results]
    assert keys == sorted(keys)
    assert 0.0 <= report.collision_probability <= 1.0
