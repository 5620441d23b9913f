import logging
import os

import click

from jetpack_cli.cli.commands.changelog import changelog_cmd, changelogger_cmd
from jetpack_cli.cli.commands.config import config_group
from jetpack_cli.cli.ensure import Ensure
from jetpack_cli.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

# Enable debug logging if JETPACK_CLI_DEBUG environment variable is set
if os.getenv("JETPACK_CLI_DEBUG"):
    logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


@click.group(name="jetpack", context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="jetpack-cli")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Development tools for the Jetpack monorepo."""
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context()
        except ValueError as e:
            Ensure.fail(str(e))


# Register all commands
cli.add_command(changelog_cmd)
cli.add_command(changelogger_cmd)
cli.add_command(config_group)


def main() -> None:
    """CLI entry point used by the `jetpack` console script."""
    cli()
