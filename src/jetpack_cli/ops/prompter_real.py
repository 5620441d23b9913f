"""Terminal-backed project prompt using rich for listing and click for input."""

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from jetpack_cli.core.errors import ProjectNotFoundError
from jetpack_cli.core.projects import list_project_types, list_projects
from jetpack_cli.ops.prompter import ProjectPrompter


class RealProjectPrompter(ProjectPrompter):
    """Two-step prompt: first the project type, then a project of that type.

    Choices are rendered as a table on stderr, then read with click.prompt
    so invalid answers are re-asked instead of failing.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console if console is not None else Console(stderr=True)

    def _choose(self, title: str, choices: list[str]) -> str:
        table = Table(title=title, show_header=False, box=None)
        table.add_column("choice", style="cyan")
        for choice in choices:
            table.add_row(choice)
        self._console.print(table)

        if len(choices) == 1:
            return choices[0]
        return click.prompt(
            title,
            type=click.Choice(choices),
            show_choices=False,
            err=True,
        )

    def prompt_for_project(self, projects_root: Path) -> str:
        project_types = list_project_types(projects_root)
        if not project_types:
            raise ProjectNotFoundError(f"No project types found in {projects_root}")
        project_type = self._choose("What type of project are you working on today?", project_types)

        names = list_projects(projects_root, project_type)
        if not names:
            raise ProjectNotFoundError(f"No projects found in {projects_root / project_type}")
        name = self._choose(f"Please choose which {project_type} project", names)

        return f"{project_type}/{name}"
