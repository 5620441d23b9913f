"""Interactive project selection interface.

Asking the user which project to act on is the one place a command blocks on
terminal input. It sits behind an ABC so tests can answer without a TTY.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class ProjectPrompter(ABC):
    """Abstract interface for asking the user to pick a project."""

    @abstractmethod
    def prompt_for_project(self, projects_root: Path) -> str:
        """Ask the user for a project under projects_root.

        Args:
            projects_root: Directory containing `<type>/<name>` project folders

        Returns:
            Selected project in "type/name" form

        Raises:
            ProjectNotFoundError: If there is nothing to choose from
        """
        ...
