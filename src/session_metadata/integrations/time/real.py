"""Real clock implementation using datetime.now()."""

from datetime import UTC, datetime

from session_metadata.integrations.time.abc import Time


class RealTime(Time):
    """Production implementation reading the system clock in UTC."""

    def now(self) -> datetime:
        return datetime.now(UTC)
