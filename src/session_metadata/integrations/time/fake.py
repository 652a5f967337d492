"""Fake Time implementation for testing."""

from datetime import UTC, datetime

from session_metadata.integrations.time.abc import Time


class FakeTime(Time):
    """In-memory clock that always returns the configured instant.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.
    """

    def __init__(self, now: datetime | None = None) -> None:
        """Create FakeTime.

        Args:
            now: Fixed instant to report (defaults to 2024-01-15T10:30:00Z)
        """
        self._now = now or datetime(2024, 1, 15, 10, 30, 0, tzinfo=UTC)
        self._now_calls = 0

    @property
    def now_calls(self) -> int:
        """Number of times now() was called.

        This property is for test assertions only.
        """
        return self._now_calls

    def now(self) -> datetime:
        self._now_calls += 1
        return self._now
