"""
配置层 - 加载运行期配置

职责：
- 加载 paramstore.yaml（参数源与日志配置）
- 环境变量覆盖（PARAMSTORE_ 前缀）
- 按配置构建参数存储、初始化日志
"""

from .logging_setup import setup_logging
from .runtime_config import (
    LoggingConfig,
    RuntimeConfig,
    SourceConfig,
    build_store,
    get_config,
    reload_config,
)

__all__ = [
    "RuntimeConfig",
    "SourceConfig",
    "LoggingConfig",
    "get_config",
    "reload_config",
    "build_store",
    "setup_logging",
]
