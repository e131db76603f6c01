"""
paramstore - 命名空间聚合的动态参数存储

模块结构：
- interfaces  参数源接口与异常体系
- models/     动态值（DynamicValue）
- store/      参数存储（加载/重载/查找）
- sources/    参数源实现（内存/YAML）
- config/     运行期配置与日志初始化
- cli         命令行工具
"""

from .interfaces import (
    IParameterSource,
    KeyNotFound,
    ParamStoreError,
    SourceUnavailable,
    TypeMismatch,
)
from .models import Conversion, DynamicValue, ValueKind
from .sources import InMemoryParameterSource, YamlParameterSource
from .store import ParameterStore

__version__ = "0.1.0"

__all__ = [
    "IParameterSource",
    "ParamStoreError",
    "KeyNotFound",
    "TypeMismatch",
    "SourceUnavailable",
    "DynamicValue",
    "ValueKind",
    "Conversion",
    "ParameterStore",
    "InMemoryParameterSource",
    "YamlParameterSource",
]
