"""Fixed instant used by tests that assert on storedAt stamps."""

from datetime import UTC, datetime

FIXED_NOW = datetime(2024, 1, 15, 10, 30, 0, tzinfo=UTC)
FIXED_STAMP = "2024-01-15T10:30:00.000Z"
