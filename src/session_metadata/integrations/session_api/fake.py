"""Fake in-memory session API for testing."""

from typing import Any

from session_metadata.integrations.session_api.abc import SessionApi
from session_metadata.models import SessionApiError, SessionRecord


class FakeSessionApi(SessionApi):
    """In-memory fake implementation for testing.

    This class tracks all operations for test assertions.
    State is provided via constructor or captured during execution.
    """

    def __init__(
        self,
        sessions: dict[str, dict[str, Any]] | None = None,
        update_error: Any = None,
    ) -> None:
        """Create FakeSessionApi.

        Args:
            sessions: Optional initial session records (session_id -> record)
            update_error: If set, every title update fails with this payload
        """
        self._sessions: dict[str, dict[str, Any]] = sessions or {}
        self._update_error = update_error
        self._get_calls: list[tuple[str, str]] = []
        self._title_updates: list[tuple[str, str]] = []
        self._closed = False

    @property
    def sessions(self) -> dict[str, dict[str, Any]]:
        """Get current session records for test assertions."""
        return self._sessions.copy()

    @property
    def closed(self) -> bool:
        """Whether close() was called."""
        return self._closed

    @property
    def get_calls(self) -> list[tuple[str, str]]:
        """(session_id, directory) pairs passed to get_session()."""
        return self._get_calls

    @property
    def title_updates(self) -> list[tuple[str, str]]:
        """(session_id, title) pairs passed to update_session_title()."""
        return self._title_updates

    def get_session(self, session_id: str, directory: str) -> SessionRecord | SessionApiError:
        self._get_calls.append((session_id, directory))
        if session_id not in self._sessions:
            return _not_found(session_id)
        return SessionRecord(data=dict(self._sessions[session_id]))

    def update_session_title(
        self, session_id: str, directory: str, title: str
    ) -> SessionRecord | SessionApiError:
        self._title_updates.append((session_id, title))
        if self._update_error is not None:
            return SessionApiError(payload=self._update_error)
        if session_id not in self._sessions:
            return _not_found(session_id)

        record = {**self._sessions[session_id], "title": title}
        self._sessions[session_id] = record
        return SessionRecord(data=dict(record))

    def close(self) -> None:
        self._closed = True


def _not_found(session_id: str) -> SessionApiError:
    return SessionApiError(
        payload={"name": "NotFoundError", "data": {"message": f"Session not found: {session_id}"}}
    )
