"""
模块接口契约 - 定义外部参数源接口与异常体系

设计原则：
1. 参数存储只依赖 IParameterSource 抽象，不直接调用具体参数服务
2. 测试时用内存参数源替换，保证结果确定
3. 所有错误都在调用点抛出，不做内部重试

使用方式：
    from paramstore.interfaces import IParameterSource

    class MySource(IParameterSource):
        def list_names(self) -> list[str]:
            ...
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


# ============================================================================
# 参数源接口
# ============================================================================

class IParameterSource(ABC):
    """参数源接口 - 提供完整限定名的参数列表与取值"""

    @abstractmethod
    def list_names(self) -> list[str]:
        """
        列出当前全部参数名

        Returns:
            完整限定的参数名列表（如 "/robot/gain"），顺序即报告顺序

        Raises:
            SourceUnavailable: 参数源不可达
        """
        ...

    @abstractmethod
    def get_value(self, name: str) -> Any:
        """
        获取单个参数的当前原始值

        Args:
            name: 完整限定的参数名

        Returns:
            bool / int / float / str 或由它们组成的列表

        Raises:
            SourceUnavailable: 参数不存在或参数源不可达
        """
        ...

    @abstractmethod
    def current_context_path(self) -> str:
        """
        调用方自身的默认命名空间前缀

        用于把相对命名空间解析为绝对命名空间（如 "/robot/"）。
        """
        ...


# ============================================================================
# 异常定义
# ============================================================================

class ParamStoreError(Exception):
    """基础异常"""
    pass


class KeyNotFound(ParamStoreError, KeyError):
    """查找的键不存在"""

    def __init__(self, key: str):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Key {self.key} not found"


class TypeMismatch(ParamStoreError, TypeError):
    """动态值无法转换为请求的类型"""

    def __init__(self, expected: str, actual: str, detail: str = ""):
        message = f"无法将 {actual} 转换为 {expected}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class SourceUnavailable(ParamStoreError):
    """参数源无法列出或获取参数"""

    def __init__(self, message: str, name: str | None = None):
        super().__init__(message)
        self.name = name
