"""Project identifiers and project discovery inside the monorepo.

A project lives at `<projects_root>/<type>/<name>` and is identified by the
string "type/name", e.g. "plugins/jetpack" or "packages/changelogger".
"""

from pathlib import Path

PROJECTS_PREFIXES = ("./projects/", "projects/")


def normalize_project(project: str | None) -> str | None:
    """Return project in canonical "type/name" form.

    Accepts the forms people paste from a shell or a file browser:

        >>> normalize_project("projects/plugins/jetpack/")
        'plugins/jetpack'

    Blank values normalize to None so the caller can prompt instead.
    """
    if project is None:
        return None

    value = project.strip().replace("\\", "/")
    for prefix in PROJECTS_PREFIXES:
        if value.startswith(prefix):
            value = value.removeprefix(prefix)
            break
    value = value.strip("/")

    if not value:
        return None
    return value


def is_project_identifier(project: str) -> bool:
    """True if project is a canonical "type/name" pair.

    Both parts must be real names: "." and ".." would step outside the
    projects root.
    """
    parts = project.split("/")
    return len(parts) == 2 and all(part and part not in (".", "..") for part in parts)


def _visible_subdirectories(path: Path) -> list[str]:
    if not path.is_dir():
        return []
    return sorted(
        child.name for child in path.iterdir() if child.is_dir() and not child.name.startswith(".")
    )


def list_project_types(projects_root: Path) -> list[str]:
    """List project types (plugins, packages, ...) under projects_root."""
    return _visible_subdirectories(projects_root)


def list_projects(projects_root: Path, project_type: str) -> list[str]:
    """List project names of one type, without the type prefix."""
    return _visible_subdirectories(projects_root / project_type)
