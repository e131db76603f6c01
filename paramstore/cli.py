"""
命令行工具 - 加载 YAML 参数文件并打印参数

用法：
    paramstore-dump --yaml params.yaml --ns /robot/
    paramstore-dump --config paramstore.yaml --key gain
"""

from __future__ import annotations

import argparse
import logging
import sys

from .config import RuntimeConfig, build_store, reload_config, setup_logging
from .interfaces import ParamStoreError

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Load a YAML parameter file and print the resolved keys.")
    ap.add_argument("--config", default=None, help="运行期配置 paramstore.yaml")
    ap.add_argument("--yaml", default=None, help="参数文件路径（覆盖配置中的 source.yaml_path）")
    ap.add_argument("--ns", action="append", default=None, help="命名空间，可重复；默认为上下文命名空间")
    ap.add_argument("--context", default=None, help="上下文路径，用于解析相对命名空间")
    ap.add_argument("--key", default=None, help="只打印单个键")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    config = reload_config(args.config) if args.config else RuntimeConfig()
    setup_logging(config.logging)

    overrides: dict[str, object] = {}
    if args.yaml:
        overrides["yaml_path"] = args.yaml
    if args.context:
        overrides["context_path"] = args.context
    if args.ns:
        overrides["namespaces"] = args.ns
    config = config.model_copy(update={"source": config.source.model_copy(update=overrides)})

    if not config.source.yaml_path:
        print("error: no parameter file given (--yaml or source.yaml_path)", file=sys.stderr)
        return 2

    try:
        store = build_store(config)

        if args.key is not None:
            print(store.lookup(args.key))
            return 0

        for key, value in store.items():
            print(f"{key}: {value}")
    except ParamStoreError as e:
        logger.error(f"参数加载失败: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
