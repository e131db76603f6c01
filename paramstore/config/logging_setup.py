"""
日志初始化 - 按 LoggingConfig 配置根日志

库本身只使用 logging.getLogger(__name__)，不在导入时配置日志；
由命令行等入口调用 setup_logging。
"""

from __future__ import annotations

import logging
import sys

from .runtime_config import LoggingConfig

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(config: LoggingConfig) -> None:
    """配置根日志（级别/控制台/可选文件）"""
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.log_to_file:
        handlers.append(logging.FileHandler(config.log_file, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
