"""Host session API integration."""

from session_metadata.integrations.session_api.abc import SessionApi
from session_metadata.integrations.session_api.real import RealSessionApi

__all__ = ["RealSessionApi", "SessionApi"]
