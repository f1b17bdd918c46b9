"""
Unit tests for the error hierarchy.
"""
# 说明：异常体系的单元测试。
# 覆盖：
# - 输入校验异常同时属于 ParamValidationError / ValueError / PorticoError
# - ImplementationInvariantViolated 的诊断字段与消息格式
# - SourceError 兼容 OSError 捕获

import pytest

from portico.core.errors import (
    ImplementationInvariantViolated,
    InvalidBasePort,
    InvalidIdentifier,
    InvalidRange,
    MalformedInput,
    PorticoError,
    SourceError,
)
from portico.core.utils.param_validation import ParamValidationError


@pytest.mark.parametrize("error", [InvalidIdentifier, InvalidBasePort, InvalidRange, MalformedInput])
def test_input_errors_share_bases(error) -> None:
    # 输入错误可以按库基类、参数校验基类或 ValueError 捕获
    exc = error("bad input")
    assert isinstance(exc, PorticoError)
    assert isinstance(exc, ParamValidationError)
    assert isinstance(exc, ValueError)
    assert str(exc) == "bad input"


def test_invariant_violation_message() -> None:
    # 验证诊断字段与消息中包含策略名称、端口与期望范围
    exc = ImplementationInvariantViolated("sdbm", "buggy", offset=150, base_port=3000, range_size=100)
    assert exc.port == 3150
    assert exc.offset == 150
    assert (exc.hash_name, exc.reducer_name) == ("sdbm", "buggy")
    text = str(exc)
    assert "'sdbm'" in text and "'buggy'" in text
    assert "3150" in text
    assert "3000 to 3099" in text
    assert not isinstance(exc, ParamValidationError)
    assert isinstance(exc, RuntimeError)


def test_invariant_violation_custom_message() -> None:
    exc = ImplementationInvariantViolated("twin", "knuth", offset=-1, base_port=3001, range_size=1, message="custom")
    assert str(exc) == "custom"


def test_source_error_is_os_error() -> None:
    with pytest.raises(OSError):
        raise SourceError("package.json not found at x")
