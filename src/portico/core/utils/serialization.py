"""
Serialization helpers for analysis results and reports.

Provides JSON helpers that understand dataclasses and objects exposing
``to_dict``, plus a small metadata envelope for command-line output.
"""
# 说明：序列化辅助工具，统一 JSON 编码行为。
# 职责：
# - 内部 _prepare：支持 dataclass 与自定义对象（实现 to_dict）的统一前处理
# - serialize_to_json：带缩进控制的 JSON 序列化接口
# - with_metadata：为输出载荷附加 metadata（含 UTC 时间戳）封装

from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional


def _prepare(obj: Any) -> Any:
    # 将 dataclass 或实现了 to_dict 的对象转换为可 JSON 序列化的基础结构
    if hasattr(obj, "to_dict"):
        return obj.to_dict()
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    return obj


def serialize_to_json(obj: Any, *, indent: Optional[int] = 2) -> str:
    # 将对象序列化为 JSON 字符串，嵌套对象通过 default 钩子逐层展开
    return json.dumps(_prepare(obj), default=_prepare, ensure_ascii=False, indent=indent)


def with_metadata(payload: Mapping[str, Any], **metadata: Any) -> Dict[str, Any]:
    """Wrap ``payload`` with a ``metadata`` block carrying an ISO timestamp."""
    meta = dict(metadata)
    meta.setdefault("timestamp", datetime.now(timezone.utc).isoformat())
    return {"metadata": meta, **dict(payload)}
