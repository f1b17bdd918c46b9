"""
Unit tests for serialization utilities.
"""
# 说明：JSON 序列化工具的单元测试。
# 覆盖：
# - serialize_to_json：支持 dataclass 与 to_dict 对象的 JSON 往返
# - with_metadata：附加 metadata 块与 UTC 时间戳

import dataclasses
import json

from portico.analysis import PortAnalysis
from portico.core.utils import serialize_to_json, with_metadata


@dataclasses.dataclass
class Sample:
    name: str
    port: int


def test_serialize_dataclass() -> None:
    # 验证 dataclass 对象按字段序列化
    data = json.loads(serialize_to_json(Sample("react", 3001)))
    assert data == {"name": "react", "port": 3001}


def test_serialize_prefers_to_dict() -> None:
    # 实现 to_dict 的对象使用其自定义结构（端口键转换为字符串）
    analysis = PortAnalysis(entries={"a": 3001}, ports={3001: ["a"]})
    data = json.loads(serialize_to_json(analysis))
    assert data == {"entries": {"a": 3001}, "ports": {"3001": ["a"]}}


def test_nested_objects_and_unicode() -> None:
    # 嵌套对象经 default 钩子展开，非 ASCII 字符原样输出
    text = serialize_to_json({"items": [Sample("日本", 1)]}, indent=None)
    assert "日本" in text
    assert json.loads(text)["items"][0]["port"] == 1


def test_with_metadata_adds_timestamp() -> None:
    # 验证 metadata 块包含传入字段与 ISO 时间戳
    document = with_metadata({"results": []}, import_map="map.json")
    assert document["results"] == []
    assert document["metadata"]["import_map"] == "map.json"
    assert "T" in document["metadata"]["timestamp"]
    assert list(document)[0] == "metadata"
