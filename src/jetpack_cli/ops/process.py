"""Process execution interface for spawning project tooling.

This module defines the abstract interface for running an external program
with the terminal handed over to it, following the ops pattern of
ABC-based dependency injection for testability.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class ProcessRunner(ABC):
    """Abstract interface for blocking subprocess execution.

    Real implementations use subprocess with inherited stdio so the child's
    prompts and output reach the user live. Fake implementations record calls
    in memory for unit tests.
    """

    @abstractmethod
    def run_inherited(self, executable: Path, arguments: list[str], cwd: Path) -> int:
        """Run executable to completion with stdin/stdout/stderr inherited.

        Args:
            executable: Program to run. Relative paths are resolved against cwd.
            arguments: Arguments passed after the executable, in order
            cwd: Working directory for the child (must exist)

        Returns:
            Exit code of the child process

        Raises:
            ExecutableNotFoundError: If the executable cannot be started
        """
        ...
