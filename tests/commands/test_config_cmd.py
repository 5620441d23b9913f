"""Tests for the `jetpack config` command group."""

from pathlib import Path

from click.testing import CliRunner

from jetpack_cli.cli.cli import cli
from jetpack_cli.core.config import CliConfig, load_config
from jetpack_cli.core.context import JetpackContext


def test_config_set_then_get_projects_dir(tmp_path: Path) -> None:
    cfg = tmp_path / "config.toml"
    runner = CliRunner()

    set_result = runner.invoke(
        cli, ["config", "set", "projects_dir", "src"], obj=JetpackContext.for_test(config_path=cfg)
    )
    ctx = JetpackContext.for_test(config=load_config(cfg), config_path=cfg)
    get_result = runner.invoke(cli, ["config", "get", "projects_dir"], obj=ctx)

    assert set_result.exit_code == 0, set_result.output
    assert get_result.exit_code == 0, get_result.output
    assert get_result.output.strip().endswith("src")


def test_config_set_monorepo_root_requires_directory(tmp_path: Path) -> None:
    cfg = tmp_path / "config.toml"

    result = CliRunner().invoke(
        cli,
        ["config", "set", "monorepo_root", str(tmp_path / "missing")],
        obj=JetpackContext.for_test(config_path=cfg),
    )

    assert result.exit_code == 1
    assert "Directory not found" in result.output
    assert not cfg.exists()


def test_config_set_rejects_nested_projects_dir(tmp_path: Path) -> None:
    result = CliRunner().invoke(
        cli,
        ["config", "set", "projects_dir", "a/b"],
        obj=JetpackContext.for_test(config_path=tmp_path / "config.toml"),
    )

    assert result.exit_code == 1
    assert "Invalid projects_dir" in result.output


def test_config_set_unknown_key(tmp_path: Path) -> None:
    result = CliRunner().invoke(
        cli,
        ["config", "set", "colour", "blue"],
        obj=JetpackContext.for_test(config_path=tmp_path / "config.toml"),
    )

    assert result.exit_code == 1
    assert "Invalid config key: colour" in result.output


def test_config_get_unset_monorepo_root() -> None:
    result = CliRunner().invoke(
        cli, ["config", "get", "monorepo_root"], obj=JetpackContext.for_test()
    )

    assert result.exit_code == 1
    assert "monorepo_root is not set" in result.output


def test_config_list(tmp_path: Path) -> None:
    ctx = JetpackContext.for_test(
        config=CliConfig(monorepo_root=tmp_path, projects_dir="projects"),
        config_path=tmp_path / "config.toml",
        monorepo_root=tmp_path,
    )

    result = CliRunner().invoke(cli, ["config", "list"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert f"monorepo_root={tmp_path}" in result.output
    assert "projects_dir=projects" in result.output
    assert f"root={tmp_path}" in result.output
