"""
Unit tests for the strategy benchmark.
"""
# 说明：StrategyBenchmark / benchmark / BenchmarkReport 的单元测试。
# 覆盖：
# - 15 个组合全部出现且按 (collisions 升序, unique_ports 降序) 排序
# - 单组合失败被记录而不中断整体（注入故障归约函数）
# - 参数错误在开始前直接抛出
# - 报告摘要与生日悖论概率

import logging

import pytest

from portico.analysis import (
    BenchmarkReport,
    StrategyBenchmark,
    StrategyResult,
    analyze,
    benchmark,
    birthday_collision_probability,
    rank_results,
)
from portico.core.errors import InvalidBasePort, InvalidIdentifier, InvalidRange, MalformedInput
from portico.hashing import build_reducer_table, knuth, lcg, modulo

NAMES = ["react", "react-dom", "lodash", "axios", "vue", "@company/ui", "@company/api", "express"]


def test_all_fifteen_combinations_present():
    results = benchmark(NAMES, 3001, 1997)
    assert len(results) == 15
    strategies = {r.strategy for r in results}
    assert len(strategies) == 15
    assert "twin+knuth" in strategies
    assert "double+lcg" in strategies


def test_results_sorted_by_collisions_then_unique_ports():
    results = benchmark([f"pkg-{i}" for i in range(30)], 3001, 40)
    keys = [(r.collisions, -r.unique_ports) for r in results]
    assert keys == sorted(keys)


def test_results_agree_with_single_analysis():
    for result in benchmark(NAMES, 3001, 50):
        analysis = analyze(NAMES, 3001, 50, result.hash_name, result.reducer_name)
        assert result.collisions == analysis.collision_count
        assert result.unique_ports == analysis.unique_port_count


def test_range_one_collides_everywhere():
    results = benchmark(["a", "b", "c"], 3001, 1)
    assert all(r.collisions == 3 and r.unique_ports == 1 for r in results)


def test_empty_collection_still_reports_every_combination():
    report = StrategyBenchmark().run([], 3001, 1997)
    assert len(report.results) == 15
    assert all(r.collisions == 0 and r.unique_ports == 0 for r in report.results)
    assert report.collision_probability == 0.0


def test_faulty_reducer_is_recorded_not_raised(caplog):
    reducers = build_reducer_table({"modulo": modulo, "knuth": knuth, "lcg": lcg, "broken": lambda h, r: r + 5})
    with caplog.at_level(logging.WARNING):
        report = StrategyBenchmark(reducers=reducers).run(NAMES, 3001, 1997)
    assert len(report.results) == 15
    assert len(report.failures) == 5
    assert {f.reducer_name for f in report.failures} == {"broken"}
    assert all(f.error_type == "ImplementationInvariantViolated" for f in report.failures)
    assert "failed to test" in caplog.text


@pytest.mark.parametrize(
    "kwargs, error",
    [
        ({"identifiers": None}, MalformedInput),
        ({"identifiers": "react"}, MalformedInput),
        ({"identifiers": ["ok", ""]}, InvalidIdentifier),
        ({"identifiers": NAMES, "base_port": 80}, InvalidBasePort),
        ({"identifiers": NAMES, "range_size": 0}, InvalidRange),
    ],
)
def test_parameter_errors_raise_up_front(kwargs, error):
    with pytest.raises(error):
        StrategyBenchmark().run(**kwargs)


def test_report_summary_and_probability():
    report = StrategyBenchmark().run(NAMES, 3001, 1997)
    assert isinstance(report, BenchmarkReport)
    assert report.identifier_count == len(NAMES)
    assert report.collision_probability == pytest.approx(birthday_collision_probability(len(NAMES), 1997))
    summary = report.summary()
    assert summary["best_combination"] == report.results[0].to_dict()
    assert summary["worst_combination"] == report.results[-1].to_dict()
    payload = report.to_dict()
    assert payload["total_combinations"] == 15
    assert payload["failures"] == []


def test_single_result_has_no_worst():
    report = BenchmarkReport(1, 3001, 10, 0.0, results=[StrategyResult("twin", "knuth", 0, 1)])
    assert report.best is not None
    assert report.worst is None
    assert report.summary()["worst_combination"] is None
    assert BenchmarkReport(0, 3001, 10, 0.0).summary() is None


def test_rank_results_is_stable_for_ties():
    a = StrategyResult("sdbm", "modulo", 1, 5)
    b = StrategyResult("safe", "modulo", 1, 5)
    c = StrategyResult("twin", "modulo", 0, 4)
    d = StrategyResult("cascade", "modulo", 1, 6)
    assert rank_results([a, b, c, d]) == [c, d, a, b]
