"""Locate the monorepo checkout the CLI is operating on."""

import logging
from pathlib import Path

from jetpack_cli.core.config import CliConfig

logger = logging.getLogger(__name__)


def discover_monorepo_root(start: Path, projects_dir: str) -> Path | None:
    """Walk up from start to the first directory containing projects_dir.

    Returns None when no ancestor (including start itself) qualifies.
    """
    for candidate in (start, *start.parents):
        if (candidate / projects_dir).is_dir():
            return candidate
    return None


def resolve_monorepo_root(config: CliConfig, cwd: Path) -> Path | None:
    """Configured root wins; otherwise discover from cwd."""
    if config.monorepo_root is not None:
        logger.debug("Using configured monorepo root %s", config.monorepo_root)
        return config.monorepo_root

    root = discover_monorepo_root(cwd, config.projects_dir)
    logger.debug("Discovered monorepo root %s from %s", root, cwd)
    return root
