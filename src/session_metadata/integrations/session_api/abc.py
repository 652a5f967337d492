"""Abstract base class for the host session API."""

from abc import ABC, abstractmethod

from session_metadata.models import SessionApiError, SessionRecord


class SessionApi(ABC):
    """Abstract interface for the host's session management API.

    Implementations include:
    - FakeSessionApi: In-memory for testing
    - RealSessionApi: HTTP client against the host server
    """

    @abstractmethod
    def get_session(self, session_id: str, directory: str) -> SessionRecord | SessionApiError:
        """Get a session record.

        Args:
            session_id: The session's identifier
            directory: Workspace directory the host scopes the lookup to

        Returns:
            The SessionRecord if found, SessionApiError with the host payload otherwise
        """
        ...

    @abstractmethod
    def update_session_title(
        self, session_id: str, directory: str, title: str
    ) -> SessionRecord | SessionApiError:
        """Set a session's title.

        Args:
            session_id: The session's identifier
            directory: Workspace directory the host scopes the update to
            title: New title

        Returns:
            The updated SessionRecord, or SessionApiError with the host payload
        """
        ...

    def close(self) -> None:
        """Release resources held by the implementation. No-op by default."""
