"""
pytest 配置与公共 fixtures

使用方式：
    def test_something(robot_source, store):
        assert store.keys() == []
"""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Generator

import pytest

from paramstore import InMemoryParameterSource, ParameterStore


# ============================================================================
# 参数源 Fixtures
# ============================================================================

@pytest.fixture
def robot_source() -> InMemoryParameterSource:
    """示例参数源（/robot/ 下两个参数，另有无关命名空间）"""
    return InMemoryParameterSource(
        {
            "/robot/gain": 2.5,
            "/robot/name": "arm1",
            "/robotics/ignored": True,
            "/other/x": 1,
        }
    )


@pytest.fixture
def store(robot_source: InMemoryParameterSource) -> ParameterStore:
    """空参数存储"""
    return ParameterStore(robot_source)


# ============================================================================
# 文件 Fixtures
# ============================================================================

@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """临时目录"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def params_yaml(temp_dir: Path) -> Path:
    """示例 YAML 参数文件"""
    path = temp_dir / "params.yaml"
    path.write_text(
        """robot:
  gain: 2.5
  name: arm1
  arm:
    joints: [1, 2, 3]
    enabled: true
camera:
  fps: 30
""",
        encoding="utf-8",
    )
    return path
