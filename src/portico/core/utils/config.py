"""
Runtime configuration utilities.

Centralises the command-line defaults (base port, range, strategy names,
output format, log level) and exposes helpers to read them from environment
variables or update them at runtime.
"""
# 说明：运行时配置管理工具，集中管理命令行默认参数，并支持环境变量覆写与运行期更新。
# 职责：
# - RuntimeConfig：封装基准端口、端口范围、哈希/归约名称、输出格式、日志等级等配置项
# - load_from_env(...)：按统一前缀（如 PORTICO_）从环境变量加载并解析配置值
# - get_config()：获取全局 RuntimeConfig 单例，作为命令行默认配置入口
# - configure(...)：通过关键字参数便捷更新全局配置并返回更新后的实例
# 约定：
# - 核心计算（compute_port / analyze / benchmark）从不读取全局配置，保持纯函数语义
# - BASE_PORT / RANGE 环境变量会被解析为整数，无法解析时抛出 ParamValidationError
# - 未知配置键在 update(...) 中会触发 AttributeError，避免静默吞错

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Dict

from .param_validation import ParamValidationError

DEFAULT_BASE_PORT = 3001
DEFAULT_RANGE = 1997
DEFAULT_HASH = "twin"
DEFAULT_REDUCER = "knuth"

# 环境变量后缀到配置字段的映射；整数字段需要显式类型转换
_ENV_FIELDS: Dict[str, str] = {
    "BASE_PORT": "base_port",
    "RANGE": "range_size",
    "HASH": "hash_name",
    "REDUCER": "reducer_name",
    "LOG_LEVEL": "log_level",
    "OUTPUT": "output_format",
}
_INT_FIELDS = frozenset({"base_port", "range_size"})


@dataclass
class RuntimeConfig:
    base_port: int = DEFAULT_BASE_PORT
    range_size: int = DEFAULT_RANGE
    hash_name: str = DEFAULT_HASH
    reducer_name: str = DEFAULT_REDUCER
    log_level: str = field(default_factory=lambda: os.environ.get("PORTICO_LOG_LEVEL", "WARNING"))
    output_format: str = "table"
    extra: Dict[str, Any] = field(default_factory=dict)

    def update(self, **kwargs: Any) -> None:
        # 按关键字参数更新当前配置实例，未知字段名将显式报错
        for key, value in kwargs.items():
            if not hasattr(self, key):
                raise AttributeError(f"unknown config option '{key}'")
            setattr(self, key, value)

    def load_from_env(self, prefix: str = "PORTICO_") -> None:
        # 从带有指定前缀的环境变量中加载配置，并进行类型转换后写回实例字段
        for suffix, attr in _ENV_FIELDS.items():
            env_key = f"{prefix}{suffix}"
            if env_key not in os.environ:
                continue  # 未设置对应环境变量时保持当前配置值不变
            value: Any = os.environ[env_key]
            if attr in _INT_FIELDS:
                try:
                    value = int(value)
                except ValueError as exc:
                    raise ParamValidationError(f"{env_key} must be an integer, got '{value}'") from exc
            setattr(self, attr, value)


# 全局配置单例，仅供命令行层读取默认值
_GLOBAL_CONFIG = RuntimeConfig()


def get_config() -> RuntimeConfig:
    # 返回全局 RuntimeConfig 实例
    return _GLOBAL_CONFIG


def configure(**kwargs: Any) -> RuntimeConfig:
    # 以关键字参数更新全局配置，并返回更新后的实例（便于链式调用或调试）
    _GLOBAL_CONFIG.update(**kwargs)
    return _GLOBAL_CONFIG
