"""Changelog command dispatcher.

Runs a project's changelogger with flags forwarded from `jetpack changelog`.
Flow: validate command -> compile arguments -> normalize or prompt for the
project -> resolve project path -> resolve executable -> spawn.

Nothing here exits the process. Failures before the spawn raise a
ChangelogError; the child's status comes back as an ExecutionResult and the
CLI command turns it into an exit code.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from jetpack_cli.core.context import JetpackContext
from jetpack_cli.core.errors import (
    ExecutableNotFoundError,
    ProjectNotFoundError,
    UnsupportedCommandError,
)
from jetpack_cli.core.projects import is_project_identifier, normalize_project
from jetpack_cli.core.user_feedback import UserFeedback

logger = logging.getLogger(__name__)

SUPPORTED_COMMANDS = frozenset({"add"})
RESERVED_COMMANDS = frozenset({"validate", "version", "write"})

NO_INTERACTION_FLAG = "--no-interaction"
CHANGELOGGER_PROJECT = "packages/changelogger"
CHANGELOGGER_SELF_EXECUTABLE = Path("bin/changelogger")
VENDORED_EXECUTABLE = Path("vendor/bin/changelogger")

INTERACTIVE_FALLBACK_WARNING = (
    "Need to pass all arguments for non-interactive mode. Defaulting to interactive mode."
)
FAILURE_MESSAGE = "Changelogger failed to execute command. Please see error above for more info."


@dataclass(frozen=True)
class ChangelogRequest:
    """One `jetpack changelog` invocation as typed by the user."""

    command: str
    project: str | None = None
    file: str | None = None
    significance: str | None = None
    type: str | None = None
    entry: str | None = None


@dataclass(frozen=True)
class ResolvedInvocation:
    """Everything needed to spawn the changelogger.

    executable_path is relative to project_path unless absolute.
    """

    executable_path: Path
    arguments: list[str]
    project_path: Path


@dataclass(frozen=True)
class ExecutionResult:
    exit_code: int
    project: str

    @property
    def success(self) -> bool:
        return self.exit_code == 0


def validate_command(command: str) -> None:
    """Reject anything the wrapper cannot forward yet.

    Raises:
        UnsupportedCommandError: For reserved or unknown commands
    """
    if command in SUPPORTED_COMMANDS:
        return
    if command in RESERVED_COMMANDS:
        raise UnsupportedCommandError(
            command, f"Sorry! The `{command}` command is not supported yet!"
        )
    raise UnsupportedCommandError(
        command,
        f"Unrecognized command: `{command}`. Use `jetpack changelog --help` for help.",
    )


def compile_arguments(request: ChangelogRequest, feedback: UserFeedback) -> list[str]:
    """Build the changelogger argument list from the request.

    Short flags are glued to their values (`-fCHANGELOG.md`) and absent flags
    are omitted. The changelogger only runs unattended when every flag is
    given, so `--no-interaction` is appended only then. A partial set of flags
    still runs, interactively, after a warning.
    """
    arguments: list[str] = []
    if request.command:
        arguments.append(request.command)

    flags = [
        ("-f", request.file),
        ("-s", request.significance),
        ("-t", request.type),
        ("-e", request.entry),
    ]
    flag_tokens = [f"{prefix}{value}" for prefix, value in flags if value]
    arguments.extend(flag_tokens)

    if len(flag_tokens) == len(flags):
        arguments.append(NO_INTERACTION_FLAG)
    elif flag_tokens:
        feedback.warning(INTERACTIVE_FALLBACK_WARNING)

    logger.debug("Compiled changelogger arguments: %s", arguments)
    return arguments


def resolve_project_path(projects_root: Path, project: str) -> Path:
    """Join project onto projects_root and check the directory exists.

    Raises:
        ProjectNotFoundError: If project is not "type/name" or its directory is missing
    """
    if not is_project_identifier(project):
        raise ProjectNotFoundError(
            f"Invalid project `{project}`. Use the form type/name, e.g. plugins/jetpack."
        )
    project_path = projects_root / project
    if not project_path.is_dir():
        raise ProjectNotFoundError(f"Project `{project}` doesn't exist! Typo?")
    return project_path


def resolve_executable(project: str, project_path: Path) -> Path:
    """Pick the changelogger executable for project.

    The changelogger package runs its own checkout; every other project uses
    the copy Composer installs into vendor/bin.

    Raises:
        ExecutableNotFoundError: If the vendored executable is missing
    """
    if project == CHANGELOGGER_PROJECT:
        return CHANGELOGGER_SELF_EXECUTABLE
    if (project_path / VENDORED_EXECUTABLE).exists():
        return VENDORED_EXECUTABLE
    raise ExecutableNotFoundError(
        "Path to changelogger script doesn't exist. "
        f"Try running 'jetpack install {project}' first!"
    )


def resolve_invocation(
    project: str, projects_root: Path, arguments: list[str]
) -> ResolvedInvocation:
    """Resolve where and what to run for a canonical project identifier."""
    project_path = resolve_project_path(projects_root, project)
    executable = resolve_executable(project, project_path)
    logger.debug("Resolved %s to %s in %s", project, executable, project_path)
    return ResolvedInvocation(
        executable_path=executable, arguments=arguments, project_path=project_path
    )


def execute_changelog(
    ctx: JetpackContext, request: ChangelogRequest, projects_root: Path
) -> ExecutionResult:
    """Run the changelogger for request and report how it went.

    Raises:
        UnsupportedCommandError: Before touching the filesystem
        ProjectNotFoundError: If the project directory is missing
        ExecutableNotFoundError: If the project has no changelogger
    """
    validate_command(request.command)
    arguments = compile_arguments(request, ctx.feedback)

    project = normalize_project(request.project)
    if project is None:
        project = normalize_project(ctx.prompter.prompt_for_project(projects_root))
    if project is None:
        raise ProjectNotFoundError("No project selected")

    invocation = resolve_invocation(project, projects_root, arguments)
    ctx.feedback.info(f"Running changelogger for {project}...")
    exit_code = ctx.process.run_inherited(
        invocation.executable_path, invocation.arguments, cwd=invocation.project_path
    )

    result = ExecutionResult(exit_code=exit_code, project=project)
    if result.success:
        ctx.feedback.success(f"Changelog for {project} added successfully!")
    else:
        ctx.feedback.error(FAILURE_MESSAGE)
    return result

