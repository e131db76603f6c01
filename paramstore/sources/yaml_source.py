"""
YAML 参数源 - 从 YAML 文件读取嵌套参数树

职责：
- 把嵌套映射展平为完整限定名（robot: {arm: {gain: 2.5}} -> /robot/arm/gain）
- 列表保持为列表值
- refresh() 重新读取文件，供 ParameterStore.reload 之前调用

使用方式：
    source = YamlParameterSource("params.yaml", root="/")
    store = ParameterStore(source, "/robot/")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from ..interfaces import IParameterSource, SourceUnavailable, TypeMismatch
from ..models import DynamicValue
from ..store.namespace import SEPARATOR, normalize_context

logger = logging.getLogger(__name__)


def flatten_params(data: dict[str, Any], prefix: str = SEPARATOR) -> dict[str, Any]:
    """展平嵌套映射为 名字 -> 叶子值"""
    flat: dict[str, Any] = {}
    for key, value in data.items():
        qualified = f"{prefix}{key}"
        if isinstance(value, dict):
            flat.update(flatten_params(value, qualified + SEPARATOR))
        else:
            flat[qualified] = value
    return flat


class YamlParameterSource(IParameterSource):
    """YAML 文件参数源"""

    def __init__(
        self,
        yaml_path: str | Path,
        root: str = "/",
        context_path: str = "/",
    ):
        self.yaml_path = Path(yaml_path)
        self._root = normalize_context(root)
        self._context_path = normalize_context(context_path)
        self._params: dict[str, Any] | None = None

    def refresh(self) -> None:
        """重新读取 YAML 文件"""
        self._params = self._read()

    def _read(self) -> dict[str, Any]:
        if not self.yaml_path.exists():
            raise SourceUnavailable(f"参数文件不存在: {self.yaml_path}")

        try:
            with open(self.yaml_path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise SourceUnavailable(f"参数文件读取失败: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise SourceUnavailable(f"参数文件顶层必须是映射: {self.yaml_path}")

        params = flatten_params(data, self._root)
        logger.info(f"读取参数文件: {self.yaml_path} ({len(params)} 个参数)")
        return params

    def _loaded(self) -> dict[str, Any]:
        if self._params is None:
            self._params = self._read()
        return self._params

    def list_names(self) -> list[str]:
        return list(self._loaded())

    def get_value(self, name: str) -> Any:
        params = self._loaded()
        if name not in params:
            raise SourceUnavailable(f"参数不存在: {name}", name=name)

        value = params[name]
        try:
            DynamicValue.from_raw(value)
        except TypeMismatch as e:
            raise SourceUnavailable(f"参数值形态不受支持: {name}: {e}", name=name) from e
        return value

    def current_context_path(self) -> str:
        return self._context_path
