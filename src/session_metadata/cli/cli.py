import logging
from pathlib import Path

import click

from session_metadata import __version__
from session_metadata.cli.commands.hook import hook_group
from session_metadata.cli.commands.tool import call_cmd, tool_group, tools_cmd
from session_metadata.config import debug_enabled
from session_metadata.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__)
@click.option(
    "--directory",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Workspace directory of the host session (defaults to the current directory).",
)
@click.pass_context
def cli(ctx: click.Context, directory: Path | None) -> None:
    """Attach JSON metadata to host sessions and annotate shell commands."""
    if debug_enabled():
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        plugin_ctx = create_context(directory if directory is not None else Path.cwd())
        ctx.obj = plugin_ctx
        ctx.call_on_close(plugin_ctx.session_api.close)


cli.add_command(call_cmd)
cli.add_command(hook_group)
cli.add_command(tool_group)
cli.add_command(tools_cmd)


def main() -> None:
    """CLI entry point used by the `session-metadata` console script."""
    cli()
