"""Tool surface exposed to the host agent framework.

Every tool returns a human-readable string. Expected failures (host errors,
missing or corrupt metadata, filesystem errors) are rendered into that string
rather than raised.
"""

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ValidationError

from session_metadata.context import PluginContext
from session_metadata.metadata_store import (
    MetadataFound,
    MetadataMalformed,
    MetadataNotFound,
    MetadataReadFailed,
)
from session_metadata.models import (
    SessionApiError,
    SetMetadataArgs,
    SetSessionDataArgs,
)

logger = logging.getLogger(__name__)


def _dump(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


def get_session_data(ctx: PluginContext, session_id: str) -> str:
    """Return the host's session record as formatted JSON."""
    result = ctx.session_api.get_session(session_id, str(ctx.directory))
    if isinstance(result, SessionApiError):
        return f"Error retrieving session data: {_dump(result.payload)}"
    return _dump(result.data)


def set_session_data(ctx: PluginContext, session_id: str, title: str) -> str:
    """Update the session title through the host API."""
    result = ctx.session_api.update_session_title(session_id, str(ctx.directory), title)
    if isinstance(result, SessionApiError):
        return f"Error updating session: {_dump(result.payload)}"

    return f"""Session updated successfully

Session ID: {session_id}
New title: {title}"""


@dataclass(frozen=True)
class ProjectLookupError:
    """The session's project could not be resolved."""

    message: str


def _resolve_project_id(
    ctx: PluginContext, session_id: str, purpose: str
) -> str | ProjectLookupError:
    """Look up the session's projectID.

    Returns:
        The project identifier, or ProjectLookupError with the user-facing message
    """
    result = ctx.session_api.get_session(session_id, str(ctx.directory))
    if isinstance(result, SessionApiError):
        logger.debug("Session lookup failed: %s", result.payload)
        return ProjectLookupError(
            message=f"Error: Could not retrieve session data to locate {purpose}"
        )

    project_id = result.project_id
    if project_id is None:
        return ProjectLookupError(
            message=f"Error: Session {session_id} has no projectID; cannot locate {purpose}"
        )
    return project_id


def get_metadata(ctx: PluginContext, session_id: str) -> str:
    """Return the stored metadata document as formatted JSON."""
    project_id = _resolve_project_id(ctx, session_id, "metadata")
    if isinstance(project_id, ProjectLookupError):
        return project_id.message

    result = ctx.metadata_store.read(project_id, session_id)
    if isinstance(result, MetadataFound):
        return _dump(result.document)
    if isinstance(result, MetadataNotFound):
        return f"""No metadata found for session: {session_id}

Use the setMetadata tool to store custom data for this session."""
    if isinstance(result, MetadataMalformed):
        return f"""Error: Metadata file exists but contains invalid JSON

File: {result.path}
Parse error: {result.error}"""
    if isinstance(result, MetadataReadFailed):
        return f"Error reading metadata: {result.error}"
    raise AssertionError(f"Unhandled metadata read result: {result!r}")


def set_metadata(ctx: PluginContext, session_id: str, metadata: dict[str, Any]) -> str:
    """Replace the session's metadata document with the caller's fields."""
    project_id = _resolve_project_id(ctx, session_id, "storage")
    if isinstance(project_id, ProjectLookupError):
        return project_id.message

    try:
        document = ctx.metadata_store.write(project_id, session_id, metadata)
    except (OSError, TypeError, ValueError) as e:
        logger.debug("Metadata write failed: %s: %s", type(e).__name__, e)
        return f"Error storing metadata: {e}"

    return f"""Metadata stored successfully

{_dump(document)}"""


@dataclass(frozen=True)
class ToolDefinition:
    """A tool as advertised to the host."""

    name: str
    description: str
    args_model: type[BaseModel] | None
    execute: Callable[..., str]

    def to_json(self) -> dict[str, Any]:
        if self.args_model is None:
            parameters: dict[str, Any] = {"type": "object", "properties": {}}
        else:
            parameters = self.args_model.model_json_schema()
        return {"name": self.name, "description": self.description, "parameters": parameters}


TOOL_DEFINITIONS: tuple[ToolDefinition, ...] = (
    ToolDefinition(
        name="getSessionData",
        description="Get current session information (id, title, directory, version, etc.)",
        args_model=None,
        execute=get_session_data,
    ),
    ToolDefinition(
        name="setSessionData",
        description="Update session data. Currently supports setting title only.",
        args_model=SetSessionDataArgs,
        execute=set_session_data,
    ),
    ToolDefinition(
        name="getMetadata",
        description=(
            "Get stored session metadata from external storage. "
            "Returns any custom metadata that was previously stored."
        ),
        args_model=None,
        execute=get_metadata,
    ),
    ToolDefinition(
        name="setMetadata",
        description=(
            "Store arbitrary JSON metadata for this session. "
            "Accepts any JSON object with custom fields."
        ),
        args_model=SetMetadataArgs,
        execute=set_metadata,
    ),
)


def find_tool(name: str) -> ToolDefinition:
    """Look up a tool by name.

    Raises:
        ValueError: If no tool has that name
    """
    for definition in TOOL_DEFINITIONS:
        if definition.name == name:
            return definition
    known = ", ".join(d.name for d in TOOL_DEFINITIONS)
    raise ValueError(f"Unknown tool '{name}'. Available tools: {known}")


def run_tool(ctx: PluginContext, name: str, session_id: str, args: dict[str, Any]) -> str:
    """Validate raw host arguments and execute the named tool.

    Raises:
        ValueError: If the tool name is unknown
    """
    definition = find_tool(name)
    logger.debug("Running tool %s for session %s", name, session_id)
    if definition.args_model is None:
        return definition.execute(ctx, session_id)

    try:
        parsed = definition.args_model.model_validate(args)
    except ValidationError as e:
        return f"Error: Invalid arguments for {name}: {e}"
    return definition.execute(ctx, session_id, **parsed.model_dump())
