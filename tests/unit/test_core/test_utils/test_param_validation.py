"""
Unit tests for validation helpers.
"""
# 说明：参数验证工具（ensure / ensure_int_in_range）的单元测试。
# 覆盖：
# - ensure：在条件为真时静默通过，条件为假时抛出 ParamValidationError 或指定异常
# - ensure_int_in_range：闭区间边界、bool 与浮点数的拒绝

import pytest

from portico.core.utils import ParamValidationError, ensure, ensure_int_in_range


class CustomError(ParamValidationError):
    pass


def test_ensure_passes_and_fails() -> None:
    # 验证 ensure 在条件为 True 时不抛错，条件为 False 时抛 ParamValidationError
    ensure(True, "should not raise")
    with pytest.raises(ParamValidationError, match="boom"):
        ensure(False, "boom")
    with pytest.raises(CustomError):
        ensure(False, "boom", error=CustomError)


def test_ensure_int_in_range_bounds() -> None:
    # 验证闭区间两端均可取到
    assert ensure_int_in_range(1, 1, 10, "bad") == 1
    assert ensure_int_in_range(10, 1, 10, "bad") == 10
    for value in (0, 11):
        with pytest.raises(ParamValidationError, match="bad"):
            ensure_int_in_range(value, 1, 10, "bad")


@pytest.mark.parametrize("value", [True, 5.0, "5", None])
def test_ensure_int_in_range_rejects_non_integers(value) -> None:
    # bool、浮点数、字符串均不是合法整数参数
    with pytest.raises(CustomError):
        ensure_int_in_range(value, 0, 10, "bad", error=CustomError)
