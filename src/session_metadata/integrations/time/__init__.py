from session_metadata.integrations.time.abc import Time
from session_metadata.integrations.time.real import RealTime

__all__ = [
    "RealTime",
    "Time",
]
