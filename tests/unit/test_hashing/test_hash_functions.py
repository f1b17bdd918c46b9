"""
Unit tests for the prime-mix hash functions.
"""
# 说明：针对 sdbm / safe / twin / cascade / double 五种哈希函数的单元测试。
# 覆盖：
# - 手工推导的固定向量（含空串与单字符）
# - 确定性、不同输入与不同函数之间的区分度
# - 特殊字符、非 BMP 字符与孤立代理项的全函数性
# - 32 位回绕：结果始终落在 [0, 2**32)

import pytest

from portico.hashing import MASK32, cascade, code_units, double, prime_mix, safe, sdbm, twin

ALL_HASHES = [sdbm, safe, twin, cascade, double]


def test_pinned_vectors():
    # 由定义手工推导：acc 初值为长度，逐字符 acc * p + code
    assert twin("a") == 128
    assert cascade("a") == 128
    assert twin("ab") == 5981
    assert cascade("ab") == 5981
    assert safe("a") == 120
    assert safe("ab") == 3387
    assert sdbm("a") == 65696


def test_double_pinned_vectors():
    # 空串：h1 = 0，h2 = 1，(0 ^ 2) * 2654435761 mod 2**32
    assert double("") == 1013904226
    assert double("a") == 3184541132


def test_empty_string_is_accepted():
    for fn in ALL_HASHES:
        assert isinstance(fn(""), int)
    assert sdbm("") == 0
    assert twin("") == 0


@pytest.mark.parametrize("fn", ALL_HASHES)
def test_hash_is_deterministic(fn):
    assert fn("test-package") == fn("test-package")


@pytest.mark.parametrize("fn", ALL_HASHES)
def test_hash_distinguishes_inputs(fn):
    assert fn("package-one") != fn("package-two")


def test_hash_functions_differ_from_each_other():
    values = {fn("test-package") for fn in ALL_HASHES}
    assert len(values) == len(ALL_HASHES)


@pytest.mark.parametrize("fn", ALL_HASHES)
@pytest.mark.parametrize("name", ["@company/my-app-v2.0.0", "x" * 500, "café", "\U0001F680-app", "\ud800lone"])
def test_hash_output_is_unsigned_32_bit(fn, name):
    value = fn(name)
    assert 0 <= value <= MASK32


def test_code_units_split_astral_characters():
    # 非 BMP 字符按 UTF-16 拆分为代理对
    assert code_units("a\U0001F680") == [0x61, 0xD83D, 0xDE80]
    assert code_units("abc") == [97, 98, 99]


def test_prime_mix_length_counts_code_units():
    # 一个非 BMP 字符占两个代码单元，初值应为 2
    astral = "\U0001F680"
    expected = ((2 * 31 + 0xD83D) * 37 + 0xDE80) & MASK32
    assert twin(astral) == expected


def test_prime_mix_explicit_initial():
    assert prime_mix("a", (37,), initial=1) == 134
    assert prime_mix("", (37,), initial=1) == 1
