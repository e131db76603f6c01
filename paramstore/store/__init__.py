"""
存储模块 - 命名空间聚合的参数映射

子模块：
- namespace: 命名空间规范化与前缀匹配
- parameter_store: 参数存储（加载/重载/查找）
"""

from .namespace import normalize_namespace
from .parameter_store import SETTLING_DELAY_SEC, ParameterStore

__all__ = [
    "ParameterStore",
    "SETTLING_DELAY_SEC",
    "normalize_namespace",
]
