"""CLI command entry point for changelog."""

from collections.abc import Callable

import click

from jetpack_cli.cli.ensure import Ensure
from jetpack_cli.core.changelog import ChangelogRequest, execute_changelog, validate_command
from jetpack_cli.core.context import JetpackContext
from jetpack_cli.core.errors import ChangelogError


def _changelog_options(fn: Callable[..., None]) -> Callable[..., None]:
    """Arguments and options shared by `changelog` and its `changelogger` alias."""
    decorators = [
        click.argument("cmd", metavar="CMD"),
        click.argument("project", required=False),
        click.option("-f", "--file", "file_", default=None, help="Name of changelog file"),
        click.option(
            "-s",
            "--significance",
            default=None,
            help="Significance of changes (patch, minor, major)",
        ),
        click.option("-t", "--type", "type_", default=None, help="Type of change"),
        click.option("-e", "--entry", default=None, help="Changelog entry"),
        click.pass_obj,
    ]
    for decorator in reversed(decorators):
        fn = decorator(fn)
    return fn


def _exit_code(child_code: int) -> int:
    """Map a child status to our exit status; signals become 128 + signum like a shell."""
    if child_code < 0:
        return 128 - child_code
    return child_code


def _run_changelog(
    ctx: JetpackContext,
    cmd: str,
    project: str | None,
    file_: str | None,
    significance: str | None,
    type_: str | None,
    entry: str | None,
) -> None:
    request = ChangelogRequest(
        command=cmd,
        project=project,
        file=file_,
        significance=significance,
        type=type_,
        entry=entry,
    )

    try:
        # Unknown commands are reported even outside a checkout
        validate_command(cmd)
        projects_root = Ensure.not_none(
            ctx.projects_root,
            f"Could not find a '{ctx.config.projects_dir}' directory above {ctx.cwd} - "
            "Run this command inside a monorepo checkout or "
            "set one with 'jetpack config set monorepo_root <path>'",
        )
        result = execute_changelog(ctx, request, projects_root)
    except ChangelogError as e:
        Ensure.fail(str(e))

    if not result.success:
        raise SystemExit(_exit_code(result.exit_code))


@click.command("changelog")
@_changelog_options
def changelog_cmd(
    ctx: JetpackContext,
    cmd: str,
    project: str | None,
    file_: str | None,
    significance: str | None,
    type_: str | None,
    entry: str | None,
) -> None:
    """Runs a changelogger command for a project.

    CMD is the changelogger command (e.g. add). PROJECT is in the form
    type/name, e.g. plugins/jetpack; you are asked for one when omitted.

    Pass all of --file, --significance, --type and --entry to run without
    any prompts.
    """
    _run_changelog(ctx, cmd, project, file_, significance, type_, entry)


# Register changelogger as a hidden alias (won't show in help)
@click.command("changelogger", hidden=True)
@_changelog_options
def changelogger_cmd(
    ctx: JetpackContext,
    cmd: str,
    project: str | None,
    file_: str | None,
    significance: str | None,
    type_: str | None,
    entry: str | None,
) -> None:
    """Runs a changelogger command for a project (alias of 'changelog')."""
    _run_changelog(ctx, cmd, project, file_, significance, type_, entry)
