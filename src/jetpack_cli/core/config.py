"""Global configuration data structures and loading.

Provides immutable config data loaded from ~/.jetpack-cli/config.toml.
Loaded once at the CLI entry point and stored in JetpackContext.
"""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

import tomlkit

CONFIG_ENV_VAR = "JETPACK_CLI_CONFIG"
DEFAULT_PROJECTS_DIR = "projects"
CONFIG_KEYS = ("monorepo_root", "projects_dir")


@dataclass(frozen=True)
class CliConfig:
    """Immutable CLI configuration.

    monorepo_root: Explicit checkout location. None means discover it from cwd.
    projects_dir: Directory under the monorepo root holding `<type>/<name>` projects.
    """

    monorepo_root: Path | None
    projects_dir: str

    @staticmethod
    def defaults() -> "CliConfig":
        return CliConfig(monorepo_root=None, projects_dir=DEFAULT_PROJECTS_DIR)


def config_path() -> Path:
    """Get the path to the config file.

    JETPACK_CLI_CONFIG overrides the default location.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".jetpack-cli" / "config.toml"


def load_config(path: Path | None = None) -> CliConfig:
    """Load config.toml if present; otherwise return defaults.

    Example config:
      monorepo_root = "~/src/jetpack"
      projects_dir = "projects"

    Raises:
        ValueError: If the file is not valid TOML or projects_dir is empty
    """
    cfg_path = path if path is not None else config_path()
    if not cfg_path.exists():
        return CliConfig.defaults()

    try:
        data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid config file {cfg_path}: {e}") from e

    root = data.get("monorepo_root")
    projects_dir = str(data.get("projects_dir", DEFAULT_PROJECTS_DIR))
    if not projects_dir:
        raise ValueError(f"Empty 'projects_dir' in {cfg_path}")

    return CliConfig(
        monorepo_root=Path(str(root)).expanduser().resolve() if root else None,
        projects_dir=projects_dir,
    )


def save_config(config: CliConfig, path: Path | None = None) -> None:
    """Save CliConfig to config.toml, preserving formatting and comments.

    Creates the config directory if it doesn't exist.
    """
    cfg_path = path if path is not None else config_path()
    cfg_path.parent.mkdir(parents=True, exist_ok=True)

    if cfg_path.exists():
        doc = tomlkit.parse(cfg_path.read_text(encoding="utf-8"))
    else:
        doc = tomlkit.document()
        doc.add(tomlkit.comment("jetpack-cli configuration"))

    if config.monorepo_root is not None:
        doc["monorepo_root"] = str(config.monorepo_root)
    elif "monorepo_root" in doc:
        del doc["monorepo_root"]
    doc["projects_dir"] = config.projects_dir

    cfg_path.write_text(tomlkit.dumps(doc), encoding="utf-8")
