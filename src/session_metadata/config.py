"""Plugin configuration.

Process-global inputs (home directory, host server address, platform) are
resolved once here and injected into the components that need them.
"""

import os
import sys
from dataclasses import dataclass
from pathlib import Path

DEFAULT_SERVER_URL = "http://localhost:4096"
DEBUG_ENV_VAR = "SESSION_METADATA_DEBUG"


@dataclass(frozen=True)
class PluginConfig:
    """Immutable plugin configuration.

    Attributes:
        storage_root: Directory holding <projectId>/<sessionId>.json files
        server_url: Address of the host server, also exported to shell commands
        platform: sys.platform value the plugin runs on
    """

    storage_root: Path
    server_url: str
    platform: str

    @staticmethod
    def from_home(
        home: Path,
        *,
        server_url: str = DEFAULT_SERVER_URL,
        platform: str = sys.platform,
    ) -> "PluginConfig":
        """Build configuration rooted at the given home directory."""
        return PluginConfig(
            storage_root=home / ".local" / "share" / "opencode" / "storage" / "session-metadata",
            server_url=server_url,
            platform=platform,
        )

    @staticmethod
    def from_env() -> "PluginConfig":
        """Build configuration for the current user (HOME / USERPROFILE)."""
        return PluginConfig.from_home(Path.home())


def debug_enabled() -> bool:
    return bool(os.getenv(DEBUG_ENV_VAR))
