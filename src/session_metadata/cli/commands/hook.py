"""Lifecycle hooks invoked by the host around tool execution.

Input: JSON on stdin with structure {"tool": "...", "sessionID": "...", "args": {...}}
Output: JSON on stdout with structure {"args": {...}} (possibly rewritten)
"""

import json
import logging
import sys

import click
from pydantic import ValidationError

from session_metadata.cli.error_boundary import cli_error_boundary
from session_metadata.context import PluginContext
from session_metadata.models import ToolExecutePayload

logger = logging.getLogger(__name__)


@click.group("hook")
def hook_group() -> None:
    """Host lifecycle hooks."""


@hook_group.command("tool-execute-before")
@click.pass_obj
@cli_error_boundary
def tool_execute_before(ctx: PluginContext) -> None:
    """Inject session environment exports into shell tool commands."""
    raw = sys.stdin.read()
    try:
        payload = ToolExecutePayload.model_validate_json(raw)
    except ValidationError as e:
        raise ValueError(f"Invalid hook payload: {e}") from e

    args = dict(payload.args)
    ctx.annotator.before_tool_execute(payload.tool, payload.session_id, args)
    logger.debug("Hook processed tool=%s session=%s", payload.tool, payload.session_id)
    click.echo(json.dumps({"args": args}))
