"""
命名空间工具 - 规范化与前缀匹配
"""

from __future__ import annotations

SEPARATOR = "/"


def normalize_context(context: str) -> str:
    """上下文路径规范化为以 / 开头并以 / 结尾"""
    if not context.startswith(SEPARATOR):
        context = SEPARATOR + context
    if not context.endswith(SEPARATOR):
        context += SEPARATOR
    return context


def normalize_namespace(namespace: str, context: str) -> str:
    """
    规范化命名空间

    - 空字符串表示调用方自身上下文
    - 补齐结尾分隔符
    - 相对命名空间基于上下文解析为绝对命名空间

    Args:
        namespace: 调用方传入的命名空间
        context: 参数源报告的当前上下文路径

    Returns:
        以 / 开头并以 / 结尾的绝对命名空间
    """
    base = normalize_context(context)
    if not namespace:
        return base
    if not namespace.endswith(SEPARATOR):
        namespace += SEPARATOR
    if not namespace.startswith(SEPARATOR):
        namespace = base + namespace
    return namespace


def in_namespace(name: str, namespace: str) -> bool:
    """name 是否位于 namespace 之下（前缀精确匹配）"""
    return name.startswith(namespace) and len(name) > len(namespace)


def strip_namespace(name: str, namespace: str) -> str:
    """去掉命名空间前缀得到本地键"""
    return name[len(namespace):]
