"""User-facing diagnostic output."""

from abc import ABC, abstractmethod

import click

from jetpack_cli.cli.output import JETPACK_GREEN, user_output


class UserFeedback(ABC):
    """Provides user-facing diagnostic output.

    Commands and the dispatcher call ctx.feedback methods instead of printing
    directly, so tests can swap in a recording fake.

    Usage:
        ctx.feedback.info("Running changelogger...")
        ctx.feedback.warning("Defaulting to interactive mode.")
        ctx.feedback.success("Changelog for plugins/jetpack added successfully!")
        ctx.feedback.error("Changelogger failed to execute command.")
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show informational message."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show success message."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Show a non-fatal warning."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Show error message."""


class InteractiveFeedback(UserFeedback):
    """Feedback printed to the terminal with colours."""

    def info(self, message: str) -> None:
        user_output(message)

    def success(self, message: str) -> None:
        """Show success message in Jetpack green."""
        user_output(click.style(message, fg=JETPACK_GREEN))

    def warning(self, message: str) -> None:
        """Show warning on a red background, matching the changelogger's own notices."""
        user_output(click.style(message, bg="red"))

    def error(self, message: str) -> None:
        """Show error message in red."""
        user_output(click.style(message, fg="red"))
