from dataclasses import replace
from pathlib import Path

import click

from jetpack_cli.cli.ensure import Ensure
from jetpack_cli.cli.output import machine_output, user_output
from jetpack_cli.core.config import CONFIG_KEYS, CliConfig, config_path, save_config
from jetpack_cli.core.context import JetpackContext


def _format_value(config: CliConfig, key: str) -> str | None:
    match key:
        case "monorepo_root":
            return str(config.monorepo_root) if config.monorepo_root is not None else None
        case "projects_dir":
            return config.projects_dir
        case _:
            return None


def _update_config_field(current: CliConfig, key: str, value: str) -> CliConfig:
    """Return a new CliConfig with one field updated.

    Raises:
        SystemExit: If the key is unknown or the value is invalid
    """
    match key:
        case "monorepo_root":
            root = Path(value).expanduser().resolve()
            Ensure.invariant(root.is_dir(), f"Directory not found: {root}")
            return replace(current, monorepo_root=root)
        case "projects_dir":
            Ensure.invariant(
                bool(value) and "/" not in value and "\\" not in value,
                f"Invalid projects_dir: {value!r} - Use a single directory name",
            )
            return replace(current, projects_dir=value)
        case _:
            Ensure.fail(f"Invalid config key: {key} - Valid keys: {', '.join(CONFIG_KEYS)}")


@click.group("config")
def config_group() -> None:
    """Manage jetpack-cli configuration."""


@config_group.command("list")
@click.pass_obj
def config_list(ctx: JetpackContext) -> None:
    """Print a list of configuration keys and values."""
    path = ctx.config_path if ctx.config_path is not None else config_path()
    user_output(click.style("Configuration:", bold=True) + f" ({path})")
    for key in CONFIG_KEYS:
        value = _format_value(ctx.config, key)
        machine_output(f"  {key}={value if value is not None else ''}")

    user_output(click.style("\nMonorepo:", bold=True))
    if ctx.monorepo_root is None:
        user_output("  (not found - run inside a checkout or set monorepo_root)")
    else:
        machine_output(f"  root={ctx.monorepo_root}")


@config_group.command("get")
@click.argument("key", metavar="KEY")
@click.pass_obj
def config_get(ctx: JetpackContext, key: str) -> None:
    """Print the value of a given configuration key."""
    Ensure.invariant(
        key in CONFIG_KEYS, f"Invalid config key: {key} - Valid keys: {', '.join(CONFIG_KEYS)}"
    )
    value = _format_value(ctx.config, key)
    if value is None:
        user_output(f"{key} is not set")
        raise SystemExit(1)
    machine_output(value)


@config_group.command("set")
@click.argument("key", metavar="KEY")
@click.argument("value", metavar="VALUE")
@click.pass_obj
def config_set(ctx: JetpackContext, key: str, value: str) -> None:
    """Update configuration with a value for the given key."""
    new_config = _update_config_field(ctx.config, key, value)
    save_config(new_config, ctx.config_path)
    user_output(f"Set {key}={_format_value(new_config, key)}")
