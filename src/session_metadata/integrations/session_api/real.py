"""HTTP-backed session API implementation."""

import logging
from typing import Any

import httpx

from session_metadata.integrations.session_api.abc import SessionApi
from session_metadata.models import SessionApiError, SessionRecord

logger = logging.getLogger(__name__)


class RealSessionApi(SessionApi):
    """Production client for the host server's session endpoints.

    Endpoints:
    - GET   /session/{id}?directory=...  -> session record
    - PATCH /session/{id}?directory=...  body {"title": ...} -> updated record
    """

    def __init__(self, server_url: str, client: httpx.Client | None = None) -> None:
        """Create RealSessionApi.

        Args:
            server_url: Base URL of the host server (e.g., http://localhost:4096)
            client: Optional preconfigured httpx client (tests pass a MockTransport)
        """
        self._server_url = server_url
        self._client = client

    def close(self) -> None:
        """Close the HTTP client if one was opened."""
        if self._client is not None:
            self._client.close()

    def _get_client(self) -> httpx.Client:
        # Created on first request; tools and hooks that never call the host open nothing
        if self._client is None:
            self._client = httpx.Client(base_url=self._server_url)
        return self._client

    def get_session(self, session_id: str, directory: str) -> SessionRecord | SessionApiError:
        logger.debug("GET session: id=%s, directory=%s", session_id, directory)
        return self._send("GET", session_id, directory, body=None)

    def update_session_title(
        self, session_id: str, directory: str, title: str
    ) -> SessionRecord | SessionApiError:
        logger.debug("PATCH session title: id=%s, title=%s", session_id, title)
        return self._send("PATCH", session_id, directory, body={"title": title})

    def _send(
        self, method: str, session_id: str, directory: str, body: dict[str, Any] | None
    ) -> SessionRecord | SessionApiError:
        try:
            response = self._get_client().request(
                method,
                f"/session/{session_id}",
                params={"directory": directory},
                json=body,
            )
        except httpx.HTTPError as e:
            logger.debug("Session API transport failure: %s: %s", type(e).__name__, e)
            return SessionApiError(payload={"name": type(e).__name__, "message": str(e)})

        payload = _decode_body(response)
        if response.is_error:
            logger.debug("Session API returned %d", response.status_code)
            return SessionApiError(payload=payload)
        if not isinstance(payload, dict):
            return SessionApiError(
                payload={"name": "UnexpectedResponse", "message": f"Expected object, got {payload!r}"}
            )
        return SessionRecord(data=payload)


def _decode_body(response: httpx.Response) -> Any:
    """Decode a JSON body, falling back to the raw text."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text
