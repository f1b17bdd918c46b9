"""
Deterministic string hash functions built on a shared prime-mix primitive.

Responsibilities
  - Map an identifier to an unsigned 32-bit integer.
  - Provide the named variants ``sdbm``, ``safe``, ``twin``, ``cascade``
    and ``double``.
  - Keep every intermediate value wrapped to 32 bits so outputs are
    reproducible across processes and implementations.

Usage Context
  - Feed the reducers in :mod:`portico.hashing.reducers` when assigning ports.

Limitations
  - Tuned for distribution quality, not adversarial collision resistance.
"""
# 说明：基于“素数混合”原语构造的一组确定性字符串哈希函数，输出无符号 32 位整数。
# 职责：
# - prime_mix：按位置循环取素数乘子，对累加器做 32 位回绕乘加
# - sdbm / safe / twin / cascade：分别对应不同素数序列的 prime_mix 变体
# - double：两路独立 prime_mix 结果经异或与黄金分割常数相乘后合并
# 约定：
# - 字符按 UTF-16 代码单元迭代，长度同样以代码单元计数（BMP 内与码点一致）
# - 不使用 Python 内置 hash()，避免进程级随机盐导致结果不稳定

from __future__ import annotations

from typing import Callable, List, Optional, Sequence

MASK32 = 0xFFFFFFFF
MERSENNE_31 = 2147483647
GOLDEN_RATIO_32 = 2654435761

HashFunction = Callable[[str], int]

SDBM_PRIMES = (65599,)
SAFE_PRIMES = (23,)
TWIN_PRIMES = (31, 37)
CASCADE_PRIMES = (31, 37, 41, 43, 47)


def code_units(name: str) -> List[int]:
    """Return the UTF-16 code units of ``name``."""
    # 绝大多数包名只含 BMP 字符，此时码点即代码单元，直接返回
    units = [ord(ch) for ch in name]
    if all(unit < 0x10000 for unit in units):
        return units
    # 非 BMP 字符拆分为代理对；surrogatepass 保证孤立代理项也不会抛错
    raw = name.encode("utf-16-le", errors="surrogatepass")
    return [int.from_bytes(raw[i : i + 2], "little") for i in range(0, len(raw), 2)]


def prime_mix(name: str, primes: Sequence[int], initial: Optional[int] = None) -> int:
    """
    Fold ``name`` into a 32-bit accumulator using cyclic prime multipliers.

    The accumulator starts at the identifier's length unless ``initial`` is
    given; at position ``i`` it becomes ``acc * primes[i % len(primes)] +
    code`` truncated to 32 bits.
    """
    units = code_units(name)
    acc = (len(units) if initial is None else initial) & MASK32
    width = len(primes)
    for i, unit in enumerate(units):
        acc = (acc * primes[i % width] + unit) & MASK32
    return acc


def sdbm(name: str) -> int:
    """Single large prime (65599)."""
    return prime_mix(name, SDBM_PRIMES)


def safe(name: str) -> int:
    """Single small prime (23)."""
    return prime_mix(name, SAFE_PRIMES)


def twin(name: str) -> int:
    """Alternating primes 31 and 37."""
    return prime_mix(name, TWIN_PRIMES)


def cascade(name: str) -> int:
    """Five cycling primes 31, 37, 41, 43, 47."""
    return prime_mix(name, CASCADE_PRIMES)


def double(name: str) -> int:
    """Combine two independent prime mixes and scramble with the golden ratio."""
    # 第二路使用固定初值 1，而非标识符长度，使两路结果相互独立
    h1 = prime_mix(name, (31,)) % MERSENNE_31
    h2 = prime_mix(name, (37,), initial=1) % MERSENNE_31
    combined = (h1 ^ (h2 << 1)) & MASK32
    return (combined * GOLDEN_RATIO_32) & MASK32
