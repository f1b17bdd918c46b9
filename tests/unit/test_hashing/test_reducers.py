"""
Unit tests for hash reducers.
"""
# 说明：modulo / knuth / lcg 三种归约函数的单元测试。
# 覆盖：
# - 输出落在 [0, range) 区间内且具有确定性
# - range == 1 时恒为 0
# - 手工推导的固定向量

import pytest

from portico.hashing import MASK32, knuth, lcg, modulo

ALL_REDUCERS = [modulo, knuth, lcg]


@pytest.mark.parametrize("reducer", ALL_REDUCERS)
def test_values_within_range(reducer):
    value = reducer(12345678, 1000)
    assert 0 <= value < 1000


@pytest.mark.parametrize("reducer", ALL_REDUCERS)
def test_reducer_is_deterministic(reducer):
    assert reducer(87654321, 500) == reducer(87654321, 500)


@pytest.mark.parametrize("reducer", ALL_REDUCERS)
@pytest.mark.parametrize("hash_value", [0, 1, 123456, MASK32])
def test_range_of_one_always_returns_zero(reducer, hash_value):
    assert reducer(hash_value, 1) == 0


@pytest.mark.parametrize("reducer", ALL_REDUCERS)
@pytest.mark.parametrize("range_size", [2, 3, 1000, 1024, 1997, 10000])
def test_extreme_hash_values_stay_in_range(reducer, range_size):
    for hash_value in (0, 1, MASK32 - 1, MASK32):
        assert 0 <= reducer(hash_value, range_size) < range_size


def test_modulo_vector():
    assert modulo(12345678, 1000) == 678


def test_knuth_vector():
    # 2654435769 >> 22 == 632 (range 1024 -> shift 22)
    assert knuth(1, 1024) == 632
    assert knuth(0, 1997) == 0


def test_lcg_vector():
    # 1013904223 / 2**32 ~= 0.23607
    assert lcg(0, 1000) == 236
