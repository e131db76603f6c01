"""
数据模型层 - 定义动态值

- DynamicValue: 参数值的带标签变体封装
- ValueKind: 变体标签
- Conversion: 转换结果（值, 错误）二元组
"""

from .dynamic_value import Conversion, DynamicValue, ValueKind

__all__ = [
    "DynamicValue",
    "ValueKind",
    "Conversion",
]
