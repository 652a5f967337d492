"""Data models shared by the tool surface and the host integrations."""

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class SessionRecord:
    """A session record as returned by the host, kept verbatim.

    The host owns the schema (id, title, directory, version, projectID, ...);
    only projectID is interpreted here.
    """

    data: dict[str, Any]

    @property
    def project_id(self) -> str | None:
        project_id = self.data.get("projectID")
        if project_id is None:
            return None
        return str(project_id)


@dataclass(frozen=True)
class SessionApiError:
    """Failure reported by the host session API.

    The payload is whatever the host sent back and is surfaced unchanged.
    """

    payload: Any


class SetSessionDataArgs(BaseModel):
    """Arguments accepted by the setSessionData tool."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="New session title")


class SetMetadataArgs(BaseModel):
    """Arguments accepted by the setMetadata tool."""

    model_config = ConfigDict(frozen=True)

    metadata: dict[str, Any] = Field(
        ..., description="JSON object with custom metadata fields"
    )


class ToolExecutePayload(BaseModel):
    """Payload the host sends before executing a tool.

    Uses extra="allow" so host-added fields (callID, ...) do not fail validation.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    tool: str = Field(..., min_length=1)
    session_id: str = Field(..., alias="sessionID", min_length=1)
    args: dict[str, Any] = Field(default_factory=dict)
