"""
运行期配置 - 读取 paramstore.yaml

职责：
- 加载参数源路径/上下文/默认命名空间等运行参数
- 提供环境变量覆盖机制（PARAMSTORE_ 前缀，嵌套用 __）
- 类型安全的配置访问

说明：load 前的稳定等待是固定常量，不属于配置。
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

from ..sources import YamlParameterSource
from ..store import ParameterStore


class SourceConfig(BaseModel):
    """参数源配置"""

    yaml_path: str = ""
    root: str = "/"
    context_path: str = "/"
    namespaces: list[str] = Field(default_factory=list)


class LoggingConfig(BaseModel):
    """日志配置"""

    log_level: str = "INFO"
    log_to_file: bool = False
    log_file: str = "paramstore.log"


class RuntimeConfig(BaseSettings):
    """运行期配置（支持环境变量覆盖）"""

    source: SourceConfig = Field(default_factory=SourceConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "env_prefix": "PARAMSTORE_",
        "env_nested_delimiter": "__",
    }

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> RuntimeConfig:
        """从YAML文件加载配置"""
        path = Path(yaml_path)
        if not path.exists():
            return cls()

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        runtime_opts = data.get("runtime_options", {})

        config = cls(
            source=SourceConfig(**cls._extract(runtime_opts, "source")),
            logging=LoggingConfig(**cls._extract(runtime_opts, "logging")),
        )

        config._resolve_paths(base_dir=path.parent)
        return config

    @staticmethod
    def _extract(data: dict[str, Any], key: str) -> dict[str, Any]:
        """提取并展平配置（支持 {default: x} 写法）"""
        section = data.get(key) or {}
        result = {}
        for k, v in section.items():
            if isinstance(v, dict) and "default" in v:
                result[k] = v["default"]
            elif not isinstance(v, dict):
                result[k] = v
        return result

    def _resolve_paths(self, base_dir: Path) -> None:
        """解析相对路径配置为绝对路径（基于配置文件所在目录）"""
        if self.source.yaml_path:
            yaml_path = Path(self.source.yaml_path)
            if not yaml_path.is_absolute():
                self.source.yaml_path = str((base_dir / yaml_path).resolve())
        if self.logging.log_to_file:
            log_file = Path(self.logging.log_file)
            if not log_file.is_absolute():
                self.logging.log_file = str((base_dir / log_file).resolve())


def build_store(config: RuntimeConfig) -> ParameterStore:
    """按配置创建 YAML 参数源并加载全部配置的命名空间"""
    if not config.source.yaml_path:
        raise ValueError("source.yaml_path not set")

    source = YamlParameterSource(
        config.source.yaml_path,
        root=config.source.root,
        context_path=config.source.context_path,
    )
    store = ParameterStore(source)
    for ns in config.source.namespaces or [""]:
        store.load(ns)
    return store


# 全局配置实例
_config: RuntimeConfig | None = None

DEFAULT_CONFIG_PATH = Path("paramstore.yaml")


def get_config() -> RuntimeConfig:
    """获取全局配置（惰性加载）"""
    global _config
    if _config is None:
        _config = RuntimeConfig.from_yaml(DEFAULT_CONFIG_PATH)
    return _config


def reload_config(yaml_path: str | Path | None = None) -> RuntimeConfig:
    """重新加载配置"""
    global _config
    path = yaml_path or DEFAULT_CONFIG_PATH
    _config = RuntimeConfig.from_yaml(path)
    return _config
