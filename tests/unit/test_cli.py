"""
命令行工具单元测试

运行：pytest tests/unit/test_cli.py -v
"""

from pathlib import Path

import pytest

from paramstore import cli


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    """避免覆盖 pytest 的日志处理器"""
    monkeypatch.setattr(cli, "setup_logging", lambda config: None)


class TestCli:
    """命令行测试"""

    def test_dump_namespace(self, params_yaml: Path, capsys):
        """测试打印命名空间下的参数"""
        code = cli.main(["--yaml", str(params_yaml), "--ns", "/robot/arm/"])
        out = capsys.readouterr().out
        assert code == 0
        assert out.splitlines() == ["joints: [1, 2, 3]", "enabled: true"]

    def test_single_key(self, params_yaml: Path, capsys):
        """测试打印单个键"""
        code = cli.main(["--yaml", str(params_yaml), "--ns", "/robot/", "--key", "gain"])
        assert code == 0
        assert capsys.readouterr().out.strip() == "2.5"

    def test_relative_namespace_with_context(self, params_yaml: Path, capsys):
        """测试基于上下文的相对命名空间"""
        code = cli.main(["--yaml", str(params_yaml), "--context", "/robot", "--ns", "arm"])
        assert code == 0
        assert "joints: [1, 2, 3]" in capsys.readouterr().out

    def test_missing_key(self, params_yaml: Path, capsys):
        """测试缺失键返回错误码"""
        code = cli.main(["--yaml", str(params_yaml), "--ns", "/robot/", "--key", "missing"])
        assert code == 1
        assert "missing" in capsys.readouterr().err

    def test_missing_file(self, temp_dir: Path, capsys):
        """测试参数文件不存在"""
        code = cli.main(["--yaml", str(temp_dir / "none.yaml")])
        assert code == 1

    def test_overrides_routed_through_build_store(self, params_yaml: Path, monkeypatch, capsys):
        """测试命令行参数覆盖配置后交给 build_store 构建存储"""
        seen = []
        real_build_store = cli.build_store

        def record(config):
            seen.append(config.source)
            return real_build_store(config)

        monkeypatch.setattr(cli, "build_store", record)
        code = cli.main(["--yaml", str(params_yaml), "--context", "/robot", "--ns", "arm", "--ns", "/camera/"])

        assert code == 0
        assert len(seen) == 1
        assert seen[0].yaml_path == str(params_yaml)
        assert seen[0].context_path == "/robot"
        assert seen[0].namespaces == ["arm", "/camera/"]
        assert "fps: 30" in capsys.readouterr().out

    def test_no_file_given(self, capsys):
        """测试未指定参数文件"""
        assert cli.main([]) == 2
