"""Tool commands: one subcommand per host tool, plus a generic dispatcher."""

import json
import sys
from typing import Any

import click

from session_metadata.cli.error_boundary import cli_error_boundary
from session_metadata.context import PluginContext
from session_metadata.tools import (
    TOOL_DEFINITIONS,
    get_metadata,
    get_session_data,
    run_tool,
    set_metadata,
    set_session_data,
)

session_id_option = click.option(
    "--session-id",
    required=True,
    help="Host session identifier.",
)


def _parse_json_object(raw: str, what: str) -> dict[str, Any]:
    """Parse a JSON object argument.

    Raises:
        ValueError: If the text is not JSON or not an object
    """
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError(f"{what} is not valid JSON: {e}") from e
    if not isinstance(value, dict):
        raise ValueError(f"{what} must be a JSON object, got {type(value).__name__}")
    return value


def _read_stdin_or(value: str | None, what: str) -> str:
    if value is not None:
        return value
    if sys.stdin.isatty():
        raise ValueError(f"No {what} provided. Pass --{what} or pipe JSON on stdin.")
    return sys.stdin.read()


@click.group("tool")
def tool_group() -> None:
    """Invoke a single plugin tool for a session."""


@tool_group.command("get-session-data")
@session_id_option
@click.pass_obj
def get_session_data_cmd(ctx: PluginContext, session_id: str) -> None:
    """Print the host's session record."""
    click.echo(get_session_data(ctx, session_id))


@tool_group.command("set-session-data")
@session_id_option
@click.option("--title", required=True, help="New session title.")
@click.pass_obj
def set_session_data_cmd(ctx: PluginContext, session_id: str, title: str) -> None:
    """Set the session title."""
    click.echo(set_session_data(ctx, session_id, title))


@tool_group.command("get-metadata")
@session_id_option
@click.pass_obj
def get_metadata_cmd(ctx: PluginContext, session_id: str) -> None:
    """Print the stored metadata document."""
    click.echo(get_metadata(ctx, session_id))


@tool_group.command("set-metadata")
@session_id_option
@click.option(
    "--metadata",
    default=None,
    help="JSON object with custom metadata fields (read from stdin if omitted).",
)
@click.pass_obj
@cli_error_boundary
def set_metadata_cmd(ctx: PluginContext, session_id: str, metadata: str | None) -> None:
    """Replace the stored metadata document."""
    fields = _parse_json_object(_read_stdin_or(metadata, "metadata"), "metadata")
    click.echo(set_metadata(ctx, session_id, fields))


@click.command("call")
@click.argument("name")
@session_id_option
@click.option(
    "--args",
    "raw_args",
    default="{}",
    show_default=True,
    help="Tool arguments as a JSON object.",
)
@click.pass_obj
@cli_error_boundary
def call_cmd(ctx: PluginContext, name: str, session_id: str, raw_args: str) -> None:
    """Invoke a tool by its host-facing NAME (e.g. setMetadata)."""
    args = _parse_json_object(raw_args, "args")
    click.echo(run_tool(ctx, name, session_id, args))


@click.command("tools")
def tools_cmd() -> None:
    """Print the tool definitions advertised to the host as JSON."""
    click.echo(json.dumps([d.to_json() for d in TOOL_DEFINITIONS], indent=2))
