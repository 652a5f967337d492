"""Per-session JSON metadata storage.

Layout:
    <storage_root>/<projectId>/<sessionId>.json

Each write fully replaces the file. The reserved keys ``sessionId`` and
``storedAt`` are always set by the store and win over caller-supplied values.
"""

import json
import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from session_metadata.integrations.time.abc import Time

logger = logging.getLogger(__name__)

RESERVED_SESSION_ID_KEY = "sessionId"
RESERVED_STORED_AT_KEY = "storedAt"
RESERVED_KEYS = (RESERVED_SESSION_ID_KEY, RESERVED_STORED_AT_KEY)


@dataclass(frozen=True)
class MetadataFound:
    """The metadata file exists and holds a JSON object."""

    path: Path
    document: dict[str, Any]


@dataclass(frozen=True)
class MetadataNotFound:
    """No metadata file exists for the session."""

    path: Path


@dataclass(frozen=True)
class MetadataMalformed:
    """The metadata file exists but does not hold a JSON object."""

    path: Path
    error: str


@dataclass(frozen=True)
class MetadataReadFailed:
    """The metadata file could not be read (permissions, I/O)."""

    path: Path
    error: str


MetadataReadResult = MetadataFound | MetadataNotFound | MetadataMalformed | MetadataReadFailed


def format_timestamp(moment: datetime) -> str:
    """Format a datetime as UTC ISO-8601 with milliseconds and a Z suffix.

    Example: 2024-01-15T10:30:00.000Z
    """
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class MetadataStore:
    """Filesystem store for per-session metadata documents."""

    def __init__(self, storage_root: Path, time: Time) -> None:
        """Create MetadataStore.

        Args:
            storage_root: Base directory for all project directories
            time: Clock used to stamp storedAt
        """
        self._storage_root = storage_root
        self._time = time

    @property
    def storage_root(self) -> Path:
        return self._storage_root

    def project_dir(self, project_id: str) -> Path:
        return self._storage_root / project_id

    def resolve_path(self, project_id: str, session_id: str) -> Path:
        """Compute the metadata file path. Pure, no I/O."""
        return self.project_dir(project_id) / f"{session_id}.json"

    def ensure_directory(self, project_id: str) -> Path:
        """Create the project directory if absent.

        Raises:
            OSError: If the directory cannot be created
        """
        directory = self.project_dir(project_id)
        directory.mkdir(parents=True, exist_ok=True)
        return directory

    def read(self, project_id: str, session_id: str) -> MetadataReadResult:
        path = self.resolve_path(project_id, session_id)
        logger.debug("Reading metadata: %s", path)

        try:
            content = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return MetadataNotFound(path=path)
        except UnicodeDecodeError as e:
            logger.debug("Undecodable metadata at %s: %s", path, e)
            return MetadataMalformed(path=path, error=str(e))
        except OSError as e:
            return MetadataReadFailed(path=path, error=str(e))

        try:
            document = json.loads(content)
        except json.JSONDecodeError as e:
            logger.debug("Malformed metadata at %s: %s", path, e)
            return MetadataMalformed(path=path, error=str(e))

        if not isinstance(document, dict):
            return MetadataMalformed(
                path=path, error=f"Expected a JSON object, got {type(document).__name__}"
            )
        return MetadataFound(path=path, document=document)

    def build_document(self, session_id: str, fields: dict[str, Any]) -> dict[str, Any]:
        """Build the document to store: caller fields, then reserved fields on top.

        Reserved keys are dropped from the caller copy first so they always
        land last in the serialized file.
        """
        document = {key: value for key, value in fields.items() if key not in RESERVED_KEYS}
        document[RESERVED_SESSION_ID_KEY] = session_id
        document[RESERVED_STORED_AT_KEY] = format_timestamp(self._time.now())
        return document

    def write(self, project_id: str, session_id: str, fields: dict[str, Any]) -> dict[str, Any]:
        """Replace the session's metadata file and return the written document.

        Raises:
            OSError: If the directory or file cannot be written
            TypeError: If a caller field is not JSON-serializable
        """
        document = self.build_document(session_id, fields)
        content = json.dumps(document, indent=2, ensure_ascii=False)

        self.ensure_directory(project_id)
        path = self.resolve_path(project_id, session_id)
        path.write_text(content, encoding="utf-8")
        logger.debug("Wrote metadata: %s (%d keys)", path, len(document))
        return document
