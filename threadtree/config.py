"""Application configuration."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from threadtree.domain.value import SortOrder


class StorageSettings(BaseModel):
    """Blob store configuration."""

    url: str = "sqlite+aiosqlite:///./threadtree.db"

    # Key under which the whole forest is stored as one blob
    blob_key: str = "comments_tree_v2"

    # Log SQL statements
    echo: bool = False


class ThreadSettings(BaseModel):
    """Comment tree behaviour."""

    # Maximum nesting depth for replies (roots are depth 0)
    # None keeps depth unbounded
    max_depth: int | None = Field(default=None, ge=0)

    # Display name used when a comment is posted without an author
    default_author: str = "Anonymous"

    # Order applied to the stored forest when the service is opened
    # None keeps the stored order (arrival order for new forests)
    default_order: SortOrder | None = None


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, using ``__`` for nested values:

        ENVIRONMENT=production
        STORAGE__URL=postgresql+asyncpg://threads:threads@db:5432/threads
        THREADS__MAX_DEPTH=8
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows STORAGE__URL syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Git commit SHA (loaded from version.txt file or defaults to "unknown")
    git_sha: str = Field(default_factory=lambda: Settings._load_git_sha())

    host: str = "localhost"
    port: int = 8000

    # Origins allowed to call the API from a browser
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Nested settings
    storage: StorageSettings = StorageSettings()
    threads: ThreadSettings = ThreadSettings()
    observability: ObservabilitySettings = ObservabilitySettings()

    @staticmethod
    def _load_git_sha() -> str:
        """Load git SHA from version file.

        Returns:
            Git SHA if version file exists, otherwise "unknown"
        """
        version_file = Path("/app/version.txt")
        if version_file.exists():
            try:
                return version_file.read_text().strip()
            except OSError:
                return "unknown"
        # In development, version file may not exist
        return "unknown"
