"""Tests for the `jetpack changelog` command."""

from pathlib import Path

from click.testing import CliRunner

from jetpack_cli.cli.cli import cli
from jetpack_cli.core.context import JetpackContext
from tests.fakes.process import FakeProcessRunner
from tests.fakes.prompter import FakeProjectPrompter
from tests.fakes.user_feedback import FakeUserFeedback


def _monorepo(tmp_path: Path, *projects: str) -> Path:
    for project in projects:
        executable = tmp_path / "projects" / project / "vendor" / "bin" / "changelogger"
        executable.parent.mkdir(parents=True)
        executable.write_text("#!/bin/sh\n", encoding="utf-8")
    (tmp_path / "projects").mkdir(exist_ok=True)
    return tmp_path


def test_changelog_add_success(tmp_path: Path) -> None:
    root = _monorepo(tmp_path, "plugins/jetpack")
    process = FakeProcessRunner()
    feedback = FakeUserFeedback()
    ctx = JetpackContext.for_test(process=process, feedback=feedback, monorepo_root=root)

    result = CliRunner().invoke(
        cli,
        [
            "changelog",
            "add",
            "plugins/jetpack",
            "-f",
            "CHANGELOG.md",
            "--significance",
            "patch",
            "-t",
            "fixed",
            "--entry",
            "Fix the thing",
        ],
        obj=ctx,
    )

    assert result.exit_code == 0, result.output
    assert process.run_calls == [
        (
            Path("vendor/bin/changelogger"),
            ["add", "-fCHANGELOG.md", "-spatch", "-tfixed", "-eFix the thing", "--no-interaction"],
            root / "projects" / "plugins" / "jetpack",
        )
    ]
    assert feedback.successes == ["Changelog for plugins/jetpack added successfully!"]


def test_changelog_child_failure_exit_code_propagates(tmp_path: Path) -> None:
    root = _monorepo(tmp_path, "plugins/jetpack")
    feedback = FakeUserFeedback()
    ctx = JetpackContext.for_test(
        process=FakeProcessRunner(exit_code=3), feedback=feedback, monorepo_root=root
    )

    result = CliRunner().invoke(cli, ["changelog", "add", "plugins/jetpack"], obj=ctx)

    assert result.exit_code == 3
    assert len(feedback.errors) == 1
    assert "failed" in feedback.errors[0]


def test_changelog_unrecognized_command(tmp_path: Path) -> None:
    root = _monorepo(tmp_path, "plugins/jetpack")
    process = FakeProcessRunner()
    ctx = JetpackContext.for_test(process=process, monorepo_root=root)

    result = CliRunner().invoke(cli, ["changelog", "remove", "plugins/jetpack"], obj=ctx)

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "Unrecognized command: `remove`" in result.output
    assert process.run_calls == []


def test_changelog_reserved_command(tmp_path: Path) -> None:
    ctx = JetpackContext.for_test(monorepo_root=_monorepo(tmp_path))

    result = CliRunner().invoke(cli, ["changelog", "write"], obj=ctx)

    assert result.exit_code == 1
    assert "not supported yet" in result.output


def test_changelog_missing_executable_suggests_install(tmp_path: Path) -> None:
    root = _monorepo(tmp_path)
    (root / "projects" / "plugins" / "boost").mkdir(parents=True)
    ctx = JetpackContext.for_test(monorepo_root=root)

    result = CliRunner().invoke(cli, ["changelog", "add", "plugins/boost"], obj=ctx)

    assert result.exit_code == 1
    assert "jetpack install plugins/boost" in result.output


def test_changelog_missing_project(tmp_path: Path) -> None:
    ctx = JetpackContext.for_test(monorepo_root=_monorepo(tmp_path))

    result = CliRunner().invoke(cli, ["changelog", "add", "plugins/nope"], obj=ctx)

    assert result.exit_code == 1
    assert "doesn't exist" in result.output


def test_changelog_prompts_for_project(tmp_path: Path) -> None:
    root = _monorepo(tmp_path, "packages/connection")
    prompter = FakeProjectPrompter(answer="packages/connection")
    process = FakeProcessRunner()
    ctx = JetpackContext.for_test(process=process, prompter=prompter, monorepo_root=root)

    result = CliRunner().invoke(cli, ["changelog", "add"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert prompter.prompt_calls == [root / "projects"]
    assert process.run_calls[0][2] == root / "projects" / "packages" / "connection"


def test_changelog_partial_flags_warn(tmp_path: Path) -> None:
    root = _monorepo(tmp_path, "plugins/jetpack")
    process = FakeProcessRunner()
    feedback = FakeUserFeedback()
    ctx = JetpackContext.for_test(process=process, feedback=feedback, monorepo_root=root)

    result = CliRunner().invoke(
        cli, ["changelog", "add", "plugins/jetpack", "-s", "minor"], obj=ctx
    )

    assert result.exit_code == 0, result.output
    assert process.run_calls[0][1] == ["add", "-sminor"]
    assert len(feedback.warnings) == 1


def test_changelog_outside_monorepo(tmp_path: Path) -> None:
    ctx = JetpackContext.for_test(cwd=tmp_path, monorepo_root=None)

    result = CliRunner().invoke(cli, ["changelog", "add", "plugins/jetpack"], obj=ctx)

    assert result.exit_code == 1
    assert "jetpack config set monorepo_root" in result.output


def test_changelogger_alias_is_hidden_but_works(tmp_path: Path) -> None:
    root = _monorepo(tmp_path, "plugins/jetpack")
    process = FakeProcessRunner()
    ctx = JetpackContext.for_test(process=process, monorepo_root=root)
    runner = CliRunner()

    result = runner.invoke(cli, ["changelogger", "add", "plugins/jetpack"], obj=ctx)
    help_result = runner.invoke(cli, ["--help"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert len(process.run_calls) == 1
    lines = help_result.output.splitlines()
    listed = [line.split()[0] for line in lines if line.startswith("  ") and line.strip()]
    assert "changelog" in listed
    assert "changelogger" not in listed


def test_changelog_unrecognized_command_outside_monorepo(tmp_path: Path) -> None:
    ctx = JetpackContext.for_test(cwd=tmp_path, monorepo_root=None)

    result = CliRunner().invoke(cli, ["changelog", "bogus"], obj=ctx)

    assert result.exit_code == 1
    assert "Unrecognized command: `bogus`" in result.output
    assert "Could not find" not in result.output


def test_changelog_parent_directory_project_rejected(tmp_path: Path) -> None:
    root = _monorepo(tmp_path)
    executable = root / "vendor" / "bin" / "changelogger"
    executable.parent.mkdir(parents=True)
    executable.write_text("#!/bin/sh\n", encoding="utf-8")
    process = FakeProcessRunner()
    ctx = JetpackContext.for_test(process=process, monorepo_root=root)

    result = CliRunner().invoke(cli, ["changelog", "add", ".."], obj=ctx)

    assert result.exit_code == 1
    assert "type/name" in result.output
    assert process.run_calls == []


def test_changelog_child_killed_by_signal(tmp_path: Path) -> None:
    root = _monorepo(tmp_path, "plugins/jetpack")
    ctx = JetpackContext.for_test(process=FakeProcessRunner(exit_code=-15), monorepo_root=root)

    result = CliRunner().invoke(cli, ["changelog", "add", "plugins/jetpack"], obj=ctx)

    assert result.exit_code == 143
