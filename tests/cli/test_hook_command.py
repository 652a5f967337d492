"""CLI tests for the tool-execute-before hook."""

import json
from pathlib import Path

from click.testing import CliRunner

from session_metadata.cli.cli import cli
from session_metadata.command_annotator import START_MARKER
from session_metadata.context import PluginContext


def _run(ctx: PluginContext, payload: dict[str, object]):
    runner = CliRunner()
    return runner.invoke(
        cli, ["hook", "tool-execute-before"], input=json.dumps(payload), obj=ctx
    )


def test_bash_command_is_annotated(plugin_context: PluginContext) -> None:
    result = _run(
        plugin_context, {"tool": "bash", "sessionID": "ses-1", "args": {"command": "ls -la"}}
    )

    assert result.exit_code == 0, result.output
    command = json.loads(result.output)["args"]["command"]
    assert command.startswith(START_MARKER)
    assert "export OPENCODE_SESSION_ID=ses-1" in command
    assert "export OPENCODE_WORKSPACE_ROOT=/fake/workspace" in command
    assert command.endswith("\nls -la")


def test_already_annotated_command_is_unchanged(plugin_context: PluginContext) -> None:
    annotated = plugin_context.annotator.annotate_command("ls", "ses-1")

    result = _run(
        plugin_context, {"tool": "bash", "sessionID": "ses-1", "args": {"command": annotated}}
    )

    assert json.loads(result.output)["args"]["command"] == annotated


def test_other_tools_pass_through(plugin_context: PluginContext) -> None:
    args = {"filePath": "/tmp/x"}

    result = _run(plugin_context, {"tool": "read", "sessionID": "ses-1", "args": args})

    assert json.loads(result.output) == {"args": args}


def test_windows_passes_through(storage_root: Path) -> None:
    ctx = PluginContext.for_test(storage_root=storage_root, platform="win32")

    result = _run(ctx, {"tool": "bash", "sessionID": "ses-1", "args": {"command": "dir"}})

    assert json.loads(result.output) == {"args": {"command": "dir"}}


def test_invalid_payload(plugin_context: PluginContext) -> None:
    runner = CliRunner()

    result = runner.invoke(
        cli, ["hook", "tool-execute-before"], input="not json", obj=plugin_context
    )

    assert result.exit_code == 1
    assert "Invalid hook payload" in result.output
