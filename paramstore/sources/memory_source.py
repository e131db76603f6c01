"""
内存参数源 - 基于字典的 IParameterSource 实现

用于单元测试与进程内嵌入，保证结果确定。
"""

from __future__ import annotations

from typing import Any

from ..interfaces import IParameterSource, SourceUnavailable
from ..store.namespace import normalize_context


class InMemoryParameterSource(IParameterSource):
    """内存参数源"""

    def __init__(self, params: dict[str, Any] | None = None, context_path: str = "/"):
        self._params: dict[str, Any] = dict(params or {})
        self._context_path = normalize_context(context_path)

    def list_names(self) -> list[str]:
        return list(self._params)

    def get_value(self, name: str) -> Any:
        if name not in self._params:
            raise SourceUnavailable(f"参数不存在: {name}", name=name)
        return self._params[name]

    def current_context_path(self) -> str:
        return self._context_path

    # === 修改 ===

    def set(self, name: str, value: Any) -> None:
        self._params[name] = value

    def update(self, params: dict[str, Any]) -> None:
        self._params.update(params)

    def delete(self, name: str) -> bool:
        """删除参数，返回是否存在"""
        if name not in self._params:
            return False
        del self._params[name]
        return True
