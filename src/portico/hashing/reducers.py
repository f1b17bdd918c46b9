"""
Reducers mapping a 32-bit hash into ``[0, range)``.
"""
# 说明：将 32 位哈希值归约到 [0, range) 偏移区间的一组确定性函数。
# 职责：
# - modulo：直接取模，非 2 的幂范围下存在取模偏差
# - knuth：乘法哈希，先乘常数取高位再取模
# - lcg：一步线性同余变换后按浮点比例缩放到目标范围
# 约定：
# - 对任意 range >= 1 输出满足 0 <= out < range；range == 1 时恒为 0

from __future__ import annotations

import math
from typing import Callable

from .hash_functions import MASK32

ReducerFunction = Callable[[int, int], int]

KNUTH_MULTIPLIER = 2654435769
LCG_MULTIPLIER = 1664525
LCG_INCREMENT = 1013904223
TWO_POW_32 = 0x100000000


def modulo(hash_value: int, range_size: int) -> int:
    """Plain ``hash % range``."""
    return hash_value % range_size


def knuth(hash_value: int, range_size: int) -> int:
    """
    Multiplicative hashing: keep the high bits of ``hash * 2654435769``.

    The product is shifted right by ``32 - ceil(log2(range))`` before the
    final modulo, so non-power-of-two ranges are valid but not perfectly
    uniform.
    """
    multiplied = (hash_value * KNUTH_MULTIPLIER) & MASK32
    # (n - 1).bit_length() 即 ceil(log2(n))，避免浮点 log2 的舍入问题
    shift = max(32 - (range_size - 1).bit_length(), 0)
    return (multiplied >> shift) % range_size


def lcg(hash_value: int, range_size: int) -> int:
    """One linear-congruential step, then scale the 32-bit result into range."""
    result = (LCG_MULTIPLIER * hash_value + LCG_INCREMENT) & MASK32
    return math.floor((result / TWO_POW_32) * range_size)
