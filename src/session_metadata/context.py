"""Plugin context for dependency injection."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from session_metadata.command_annotator import CommandAnnotator
from session_metadata.config import PluginConfig
from session_metadata.integrations.session_api.abc import SessionApi
from session_metadata.integrations.time.abc import Time
from session_metadata.metadata_store import MetadataStore


@dataclass(frozen=True)
class PluginContext:
    """Immutable context holding all dependencies for tool and hook calls.

    Created once at the entry point via create_context() and threaded through
    via Click's context system. Use for_test() in tests.

    Attributes:
        session_api: Host session API
        metadata_store: Per-session JSON storage
        annotator: Shell command annotator
        directory: Workspace directory the host runs the plugin for
        config: Resolved plugin configuration
    """

    session_api: SessionApi
    metadata_store: MetadataStore
    annotator: CommandAnnotator
    directory: Path
    config: PluginConfig

    @staticmethod
    def for_test(
        *,
        storage_root: Path,
        sessions: dict[str, dict[str, Any]] | None = None,
        session_api: SessionApi | None = None,
        time: Time | None = None,
        directory: Path | None = None,
        platform: str = "linux",
    ) -> "PluginContext":
        """Create a test context with fake implementations.

        Args:
            storage_root: Metadata storage directory (usually under tmp_path)
            sessions: Pre-populated records for FakeSessionApi (ignored if session_api given)
            session_api: Optional SessionApi implementation
            time: Optional clock. If None, creates FakeTime.
            directory: Workspace directory (defaults to Path("/fake/workspace"))
            platform: Platform the annotator believes it runs on

        Returns:
            PluginContext configured with fakes and test defaults
        """
        from session_metadata.integrations.session_api.fake import FakeSessionApi
        from session_metadata.integrations.time.fake import FakeTime

        resolved_api: SessionApi = (
            session_api if session_api is not None else FakeSessionApi(sessions=sessions)
        )
        resolved_time: Time = time if time is not None else FakeTime()
        resolved_directory = directory if directory is not None else Path("/fake/workspace")
        config = PluginConfig(
            storage_root=storage_root,
            server_url="http://localhost:4096",
            platform=platform,
        )

        return PluginContext(
            session_api=resolved_api,
            metadata_store=MetadataStore(storage_root, resolved_time),
            annotator=CommandAnnotator(resolved_directory, config.server_url, config.platform),
            directory=resolved_directory,
            config=config,
        )


def create_context(directory: Path, config: PluginConfig | None = None) -> PluginContext:
    """Create production context with real implementations.

    Args:
        directory: Workspace directory the host runs the plugin for
        config: Optional configuration. If None, derived from the environment.

    Returns:
        PluginContext backed by the host HTTP API, the system clock and the filesystem
    """
    from session_metadata.integrations.session_api.real import RealSessionApi
    from session_metadata.integrations.time.real import RealTime

    resolved_config = config if config is not None else PluginConfig.from_env()

    return PluginContext(
        session_api=RealSessionApi(resolved_config.server_url),
        metadata_store=MetadataStore(resolved_config.storage_root, RealTime()),
        annotator=CommandAnnotator(
            directory, resolved_config.server_url, resolved_config.platform
        ),
        directory=directory,
        config=resolved_config,
    )
