"""
Performance measurement helpers.

Responsibilities
  - Provide a timing utility for code blocks and callables.

Usage Context
  - Used by the strategy benchmark to time each hash/reducer combination.
  - Intended for lightweight, in-process measurements.

Limitations
  - Results depend on system load and Python runtime variability.
"""
# 说明：性能测量工具，用于统一评估执行耗时。
# 职责：
# - Timer：基于上下文管理器与 ContextDecorator 的计时工具，可用于 with 或函数装饰

from __future__ import annotations

import time
from contextlib import ContextDecorator


class Timer(ContextDecorator):
    """
    Context manager for timing code blocks.

    - Behavior
      - Records start and end timestamps using a high-resolution clock.
      - Exposes elapsed time after exiting the context.

    - Usage Notes
      - Use as a context manager or decorator via ContextDecorator.
    """
    # 计时上下文管理器：进入时记录起始时间，退出时计算耗时（秒）

    def __enter__(self) -> "Timer":
        self.start = time.perf_counter()
        self.end = None
        self.elapsed = 0.0
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.end = time.perf_counter()
        self.elapsed = self.end - self.start
