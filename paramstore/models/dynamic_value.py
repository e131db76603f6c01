"""
动态值模型 - 参数源原始值的类型擦除封装

职责：
- 包装 bool / int64 / double / string / 嵌套列表 五种形态之一
- 提供显式、带检查的类型转换（不做静默强转）
- 提供诊断用的文本渲染

转换规则：
- 类型完全匹配时成功
- 允许的拓宽：bool→int、int→float
- 其余组合抛出 TypeMismatch
"""

from __future__ import annotations

from enum import Enum
from typing import Any, NamedTuple

from pydantic import BaseModel, StrictBool, StrictFloat, StrictInt, StrictStr, model_validator

from ..interfaces import TypeMismatch

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class ValueKind(str, Enum):
    """动态值的变体标签"""
    BOOL = "bool"
    INT = "int"
    DOUBLE = "double"
    STRING = "string"
    LIST = "list"


_SCALAR_TYPES = {
    ValueKind.BOOL: bool,
    ValueKind.INT: int,
    ValueKind.DOUBLE: float,
    ValueKind.STRING: str,
}

# 目标类型 -> 可接受的变体（第一个为精确匹配，其余为拓宽）
_ACCEPTED_KINDS: dict[type, tuple[ValueKind, ...]] = {
    bool: (ValueKind.BOOL,),
    int: (ValueKind.INT, ValueKind.BOOL),
    float: (ValueKind.DOUBLE, ValueKind.INT),
    str: (ValueKind.STRING,),
    list: (ValueKind.LIST,),
}

_TARGET_NAMES: dict[type, str] = {
    bool: "bool",
    int: "int",
    float: "double",
    str: "string",
    list: "list",
}


def _target_name(target: Any) -> str:
    if target in _TARGET_NAMES:
        return _TARGET_NAMES[target]
    return getattr(target, "__name__", repr(target))


class Conversion(NamedTuple):
    """转换结果（值, 错误）二元组，二者恰有一个为 None"""
    value: Any
    error: TypeMismatch | None

    @property
    def ok(self) -> bool:
        return self.error is None


class DynamicValue(BaseModel):
    """动态值（构造后不可变，重载时整体替换）"""
    kind: ValueKind
    scalar: StrictBool | StrictInt | StrictFloat | StrictStr | None = None
    items: tuple[DynamicValue, ...] = ()

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_variant(self) -> DynamicValue:
        if self.kind is ValueKind.LIST:
            if self.scalar is not None:
                raise ValueError("列表变体不能携带标量值")
            return self
        if self.items:
            raise ValueError(f"{self.kind.value} 变体不能携带列表元素")
        if type(self.scalar) is not _SCALAR_TYPES[self.kind]:
            raise ValueError(f"{self.kind.value} 变体的值类型不符: {type(self.scalar).__name__}")
        return self

    # === 构造 ===

    @classmethod
    def from_raw(cls, raw: Any) -> DynamicValue:
        """包装参数源返回的原始值"""
        if isinstance(raw, DynamicValue):
            return raw
        if isinstance(raw, bool):
            return cls(kind=ValueKind.BOOL, scalar=raw)
        if isinstance(raw, int):
            if not INT64_MIN <= raw <= INT64_MAX:
                raise TypeMismatch("int", "int", f"{raw} 超出64位整数范围")
            return cls(kind=ValueKind.INT, scalar=raw)
        if isinstance(raw, float):
            return cls(kind=ValueKind.DOUBLE, scalar=raw)
        if isinstance(raw, str):
            return cls(kind=ValueKind.STRING, scalar=raw)
        if isinstance(raw, (list, tuple)):
            return cls(kind=ValueKind.LIST, items=tuple(cls.from_raw(x) for x in raw))
        raise TypeMismatch("DynamicValue", type(raw).__name__, "不支持的参数形态")

    # === 转换 ===

    def try_as(self, target: type) -> Conversion:
        """转换为目标类型，失败时返回错误而不抛出"""
        accepted = _ACCEPTED_KINDS.get(target)
        if accepted is None:
            return Conversion(None, TypeMismatch(_target_name(target), self.kind.value, "不支持的目标类型"))
        if self.kind not in accepted:
            return Conversion(None, TypeMismatch(_target_name(target), self.kind.value))
        if target is list:
            return Conversion(self.to_python(), None)
        return Conversion(target(self.scalar), None)

    def as_type(self, target: type) -> Any:
        """转换为目标类型，失败抛出 TypeMismatch"""
        value, error = self.try_as(target)
        if error is not None:
            raise error
        return value

    def try_as_list(self, target: type) -> Conversion:
        """转换为同构列表，任一元素失败则整体失败"""
        expected = f"list[{_target_name(target)}]"
        if self.kind is not ValueKind.LIST:
            return Conversion(None, TypeMismatch(expected, self.kind.value))

        result = []
        for index, item in enumerate(self.items):
            value, error = item.try_as(target)
            if error is not None:
                return Conversion(
                    None, TypeMismatch(expected, ValueKind.LIST.value, f"第{index}个元素: {error}")
                )
            result.append(value)
        return Conversion(result, None)

    def as_list(self, target: type, out: list | None = None) -> list:
        """
        转换为同构列表

        Args:
            target: 元素目标类型
            out: 可选的目标容器，成功时先清空再填充（不追加）；失败时保持原样

        Returns:
            转换后的列表（传入 out 时即 out 本身）

        Raises:
            TypeMismatch: 不是列表或某个元素无法转换
        """
        values, error = self.try_as_list(target)
        if error is not None:
            raise error
        if out is None:
            return values
        out.clear()
        out.extend(values)
        return out

    def to_python(self) -> Any:
        """还原为普通 Python 值"""
        if self.kind is ValueKind.LIST:
            return [item.to_python() for item in self.items]
        return self.scalar

    # === 渲染 ===

    def __str__(self) -> str:
        if self.kind is ValueKind.BOOL:
            return "true" if self.scalar else "false"
        if self.kind is ValueKind.LIST:
            return "[" + ", ".join(str(item) for item in self.items) + "]"
        return str(self.scalar)


DynamicValue.model_rebuild()
