"""Inject session environment variables into outbound shell commands.

Before the host runs its shell tool, the command text is prefixed with a
block of exports bounded by sentinel comment lines:

    # >>> session-metadata env >>>
    export OPENCODE_SESSION_ID='ses-1'
    export OPENCODE_WORKSPACE_ROOT='/path/to/workspace'
    export OPENCODE_SERVER_URL='http://localhost:4096'
    # <<< session-metadata env <<<
    <original command>

The start sentinel is the only idempotency signal: a command that already
contains it is passed through unchanged.
"""

import logging
import shlex
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

SHELL_TOOL_NAME = "bash"
UNSUPPORTED_PLATFORMS = frozenset({"win32"})

START_MARKER = "# >>> session-metadata env >>>"
END_MARKER = "# <<< session-metadata env <<<"

SESSION_ID_ENV_VAR = "OPENCODE_SESSION_ID"
WORKSPACE_ROOT_ENV_VAR = "OPENCODE_WORKSPACE_ROOT"
SERVER_URL_ENV_VAR = "OPENCODE_SERVER_URL"


class CommandAnnotator:
    """Prepends the session export block to shell tool commands."""

    def __init__(self, workspace_root: Path, server_url: str, platform: str) -> None:
        """Create CommandAnnotator.

        Args:
            workspace_root: Directory exported as the workspace root
            server_url: Host server address exported to the command
            platform: sys.platform value; annotation is disabled on unsupported ones
        """
        self._workspace_root = workspace_root
        self._server_url = server_url
        self._platform = platform

    @property
    def enabled(self) -> bool:
        return self._platform not in UNSUPPORTED_PLATFORMS

    def env_block(self, session_id: str) -> str:
        exports = [
            (SESSION_ID_ENV_VAR, session_id),
            (WORKSPACE_ROOT_ENV_VAR, str(self._workspace_root)),
            (SERVER_URL_ENV_VAR, self._server_url),
        ]
        lines = [START_MARKER]
        lines.extend(f"export {name}={shlex.quote(value)}" for name, value in exports)
        lines.append(END_MARKER)
        return "\n".join(lines)

    def annotate_command(self, command: str, session_id: str) -> str:
        """Return the command with the export block prepended.

        Commands already carrying the start marker are returned unchanged.
        """
        if START_MARKER in command:
            return command
        return f"{self.env_block(session_id)}\n{command}"

    def before_tool_execute(self, tool: str, session_id: str, args: dict[str, Any]) -> None:
        """Rewrite args["command"] in place for shell tool invocations."""
        if tool != SHELL_TOOL_NAME:
            return
        if not self.enabled:
            logger.debug("Skipping annotation on unsupported platform: %s", self._platform)
            return

        command = args.get("command")
        if not isinstance(command, str):
            return

        annotated = self.annotate_command(command, session_id)
        if annotated is command:
            logger.debug("Command already annotated for session %s", session_id)
            return
        args["command"] = annotated
