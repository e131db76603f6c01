"""
参数存储 - 按命名空间聚合参数源中的键值

职责：
1. 从一个或多个命名空间增量加载参数（去前缀后写入）
2. 按注册顺序重载全部命名空间（后注册者覆盖同名键）
3. 严格查找（缺失即抛 KeyNotFound，不插入默认值）

线程模型：
    按约定单线程使用。每个公开操作持有存储自身的可重入锁，
    但 load/lookup 之间的组合操作仍需调用方自行互斥。

已知限制：
- load 只增不减：参数源已删除的名字不会从存储中移除（需要 reload）
- load 中途失败时不回滚，本次调用已写入的键保留（部分加载）
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Any, Iterator

from ..interfaces import IParameterSource, KeyNotFound, SourceUnavailable, TypeMismatch
from ..models import DynamicValue
from .namespace import SEPARATOR, in_namespace, normalize_namespace, strip_namespace

logger = logging.getLogger(__name__)

# 查询参数源前的固定等待（秒），容忍最终一致的参数源尚未索引新值
SETTLING_DELAY_SEC = 0.001


class ParameterStore:
    """命名空间聚合的参数映射"""

    def __init__(self, source: IParameterSource, namespace: str | None = None):
        self._source = source
        self._values: dict[str, DynamicValue] = {}
        self._namespaces: dict[str, None] = {}  # 有序去重集合
        self._lock = threading.RLock()

        if namespace is not None:
            self.load(namespace)

    # === 加载 ===

    def load(self, namespace: str = "") -> list[str]:
        """
        从命名空间加载参数（新增或覆盖，不删除）

        Args:
            namespace: 命名空间；空字符串表示调用方自身上下文，
                       不以 / 开头时按上下文解析

        Returns:
            本次写入的键列表（按参数源报告顺序）

        Raises:
            SourceUnavailable: 列出或获取参数失败；之前已写入的键保留
        """
        with self._lock:
            time.sleep(SETTLING_DELAY_SEC)

            # 绝对命名空间不依赖上下文
            if namespace.startswith(SEPARATOR):
                context = SEPARATOR
            else:
                context = self._source_call(self._source.current_context_path, None)
            ns = normalize_namespace(namespace, context)
            self._namespaces.setdefault(ns, None)

            names = self._source_call(self._source.list_names, None)
            matched = [n for n in names if in_namespace(n, ns)]

            written: list[str] = []
            for name in matched:
                raw = self._source_call(self._source.get_value, name)
                key = strip_namespace(name, ns)
                try:
                    value = DynamicValue.from_raw(raw)
                except TypeMismatch as e:
                    logger.error(f"参数值形态不受支持: {name}: {e}")
                    raise SourceUnavailable(f"参数值形态不受支持: {name}: {e}", name=name) from e
                self._values[key] = value
                written.append(key)
                logger.debug(f"[{ns}] {key} = {self._values[key]}")

            logger.info(f"命名空间加载完成: {ns} ({len(written)} 个参数)")
            return written

    def reload(self) -> None:
        """清空后按注册顺序重新加载全部命名空间"""
        with self._lock:
            namespaces = list(self._namespaces)
            logger.info(f"重新加载 {len(namespaces)} 个命名空间")
            self._values.clear()
            for ns in namespaces:
                self.load(ns)

    def _source_call(self, func: Any, name: str | None) -> Any:
        """调用参数源，非 SourceUnavailable 的异常统一包装"""
        try:
            return func() if name is None else func(name)
        except SourceUnavailable as e:
            logger.error(f"参数源不可用: {e}")
            raise
        except Exception as e:
            logger.error(f"参数源调用失败: {name or func.__name__}: {e}")
            raise SourceUnavailable(f"参数源调用失败: {e}", name=name) from e

    # === 查找 ===

    def lookup(self, key: str) -> DynamicValue:
        """严格查找，缺失抛 KeyNotFound"""
        with self._lock:
            if key not in self._values:
                raise KeyNotFound(key)
            return self._values[key]

    def get(self, key: str, default: Any = None) -> Any:
        """带默认值的查找（显式选择，lookup 本身不降级）"""
        with self._lock:
            return self._values.get(key, default)

    def keys(self) -> list[str]:
        """全部键（插入顺序）"""
        with self._lock:
            return list(self._values)

    def items(self) -> list[tuple[str, DynamicValue]]:
        with self._lock:
            return list(self._values.items())

    def dump(self) -> dict[str, Any]:
        """导出为普通字典（诊断用）"""
        with self._lock:
            return {k: v.to_python() for k, v in self._values.items()}

    @property
    def namespaces(self) -> list[str]:
        """已注册的命名空间（注册顺序）"""
        with self._lock:
            return list(self._namespaces)

    def __getitem__(self, key: str) -> DynamicValue:
        return self.lookup(key)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._values

    def __len__(self) -> int:
        with self._lock:
            return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __repr__(self) -> str:
        return f"ParameterStore(namespaces={self.namespaces!r}, keys={len(self)})"
