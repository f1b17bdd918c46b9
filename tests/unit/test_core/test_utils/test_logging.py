"""
Unit tests for logging utilities.
"""
# 说明：日志配置与 identifiers 截断过滤相关的单元测试。
# 覆盖：
# - IdentifierFilter：超过上限的 identifiers 字段被截断并附加剩余数量
# - configure_logging(...)：为根 handler 挂载过滤器且不重复挂载
# - get_logger(...)：返回指定名称的 logger

import logging

from portico.core.utils import IdentifierFilter, configure_logging, get_logger


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("portico.test", logging.INFO, __file__, 1, "message", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_identifier_filter_truncates_long_lists() -> None:
    # 验证超过 10 个名称时仅保留前 10 个并追加提示
    record = _record(identifiers=[f"pkg-{i}" for i in range(25)])
    assert IdentifierFilter().filter(record) is True
    assert record.identifiers[:10] == [f"pkg-{i}" for i in range(10)]
    assert record.identifiers[-1] == "... (+15 more)"
    assert len(record.identifiers) == 11


def test_identifier_filter_leaves_short_lists() -> None:
    # 验证短列表与缺少该字段的记录保持不变
    record = _record(identifiers=["a", "b"])
    IdentifierFilter().filter(record)
    assert record.identifiers == ["a", "b"]
    plain = _record()
    assert IdentifierFilter(limit=1).filter(plain) is True
    assert not hasattr(plain, "identifiers")


def test_configure_logging_attaches_single_filter() -> None:
    # 验证多次调用 configure_logging 不会在同一 handler 上重复挂载过滤器
    configure_logging(level="INFO")
    configure_logging(level="INFO")
    root = logging.getLogger()
    assert root.level == logging.INFO
    for handler in root.handlers:
        assert sum(isinstance(f, IdentifierFilter) for f in handler.filters) <= 1


def test_get_logger_emits_messages(caplog) -> None:
    # 验证 get_logger 返回的 logger 可以正常输出消息
    logger = get_logger("portico.test")
    assert logger.name == "portico.test"
    with caplog.at_level(logging.INFO):
        logger.info("assigned %d ports", 3)
    assert "assigned 3 ports" in caplog.text
