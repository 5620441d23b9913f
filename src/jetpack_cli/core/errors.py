"""Errors raised by the changelog dispatcher before the changelogger is spawned."""


class ChangelogError(Exception):
    """Base class for fatal changelog dispatch errors."""


class UnsupportedCommandError(ChangelogError):
    """Raised when the changelogger subcommand is unknown or not implemented yet."""

    def __init__(self, command: str, message: str) -> None:
        super().__init__(message)
        self.command = command


class ProjectNotFoundError(ChangelogError):
    """Raised when the target project directory does not exist."""


class ExecutableNotFoundError(ChangelogError):
    """Raised when no changelogger executable can be resolved for a project."""
