"""
参数源实现

- memory_source: 内存字典参数源（测试与嵌入）
- yaml_source: YAML 文件参数源
"""

from .memory_source import InMemoryParameterSource
from .yaml_source import YamlParameterSource, flatten_params

__all__ = [
    "InMemoryParameterSource",
    "YamlParameterSource",
    "flatten_params",
]
