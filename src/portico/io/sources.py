"""
Readers for package descriptors and import maps.

Responsibilities
  - Extract the ``name`` field from a ``package.json`` file.
  - Load an import-map document from a path or an already parsed mapping and
    validate its ``imports`` object.
  - Bridge both sources into the port assigner and the collision analyzer.

Usage Context
  - Used by the command line and by build scripts that need a stable port.

Limitations
  - Local files only; fetching import maps over the network is not supported.
"""
# 说明：读取 package.json 与 import map 的轻量级输入适配层，将外部文件转换为核心计算所需的输入。
# 职责：
# - read_package_name / get_port_from_package_json：读取包名并计算端口
# - load_import_map：从路径或映射加载 import map，并校验 imports 字段形态
# - analyze_import_map：以 imports 的键作为标识符集合执行碰撞分析
# 约定：
# - 文件缺失、JSON 解析失败、缺少 name 字段抛出 SourceError
# - imports 缺失或不是对象抛出 MalformedInput

from __future__ import annotations

import json
from collections.abc import Mapping as MappingABC
from pathlib import Path
from typing import Any, Dict, Optional, Union

from portico.analysis.collision import PortAnalysis, analyze
from portico.assignment.port_assigner import compute_port
from portico.core.errors import MalformedInput, SourceError
from portico.core.utils.config import (
    DEFAULT_BASE_PORT,
    DEFAULT_HASH,
    DEFAULT_RANGE,
    DEFAULT_REDUCER,
)
from portico.core.utils.logging import get_logger
from portico.hashing.registry import StrategyKey

logger = get_logger(__name__)

PathLike = Union[str, Path]
ImportMapSource = Union[PathLike, MappingABC]


def _read_json(path: Path, label: str) -> Any:
    # 统一处理文件缺失与 JSON 解析错误，转换为 SourceError
    if not path.is_file():
        raise SourceError(f"{label} not found at {path}")
    try:
        text = path.read_text(encoding="utf-8")
        return json.loads(text)
    except (OSError, ValueError) as exc:
        raise SourceError(f"Failed to parse {label}: {exc}") from exc


def read_package_name(package_json_path: Optional[PathLike] = None) -> str:
    """Return the ``name`` field of ``package.json`` (default: ``./package.json``)."""
    path = Path(package_json_path) if package_json_path else Path.cwd() / "package.json"
    data = _read_json(path, "package.json")
    name = data.get("name") if isinstance(data, dict) else None
    if not isinstance(name, str) or not name:
        raise SourceError('package.json must have a "name" field')
    logger.debug("read package name %s from %s", name, path)
    return name


def get_port_from_package_json(
    package_json_path: Optional[PathLike] = None,
    base_port: int = DEFAULT_BASE_PORT,
    range_size: int = DEFAULT_RANGE,
    hash_name: StrategyKey = DEFAULT_HASH,
    reducer_name: StrategyKey = DEFAULT_REDUCER,
) -> int:
    """Stable port for the package described by ``package.json``."""
    name = read_package_name(package_json_path)
    return compute_port(name, base_port, range_size, hash_name, reducer_name)


def load_import_map(source: ImportMapSource) -> Dict[str, Any]:
    """
    Load an import map and check that it carries an ``imports`` object.

    ``source`` may be a filesystem path or an already parsed mapping.
    """
    if isinstance(source, (str, Path)):
        document = _read_json(Path(source), "import map")
        logger.debug("loaded import map from %s", source)
    elif isinstance(source, MappingABC):
        document = source
    else:
        raise MalformedInput("import map must be a path or a mapping")

    if not isinstance(document, MappingABC):
        raise MalformedInput('Import map must have an "imports" object')
    imports = document.get("imports")
    if not isinstance(imports, MappingABC):
        raise MalformedInput('Import map must have an "imports" object')
    return dict(document)


def analyze_import_map(
    source: ImportMapSource,
    base_port: int = DEFAULT_BASE_PORT,
    range_size: int = DEFAULT_RANGE,
    hash_name: StrategyKey = DEFAULT_HASH,
    reducer_name: StrategyKey = DEFAULT_REDUCER,
) -> PortAnalysis:
    """Analyze the ports assigned to every specifier in an import map."""
    import_map = load_import_map(source)
    return analyze(import_map["imports"], base_port, range_size, hash_name, reducer_name)
