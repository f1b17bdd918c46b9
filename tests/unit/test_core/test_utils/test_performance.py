"""
Unit tests for performance measurement helpers.
"""
# 说明：性能测量辅助工具 Timer 的单元测试。
# 覆盖：
# - Timer：作为上下文管理器使用时是否正确记录 elapsed 时间
# - Timer：作为装饰器使用时每次调用都重新计时

from time import sleep

from portico.core.utils import Timer


def dummy_work(delay: float = 0.001) -> None:
    # 模拟带可控延迟的轻量工作负载，用作性能测量目标函数
    sleep(delay)


def test_timer_context_manager() -> None:
    # 验证 Timer 作为上下文管理器使用时，是否会记录正的 elapsed 值
    with Timer() as timer:
        dummy_work(0.001)
    assert timer.elapsed > 0
    assert timer.end >= timer.start


def test_timer_as_decorator() -> None:
    # 验证 ContextDecorator 形式下被装饰函数正常返回
    timer = Timer()

    @timer
    def work() -> str:
        dummy_work(0.0)
        return "done"

    assert work() == "done"
    assert timer.elapsed >= 0
