from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for the call graph browser.

    Values are loaded from environment variables and `.env`.

    Notes:
    - STACKVIEW_ROOT is only used when neither --root nor the graph file names a root.
    - Logs go to a file; the browser owns the terminal while it runs.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Navigation
    STACKVIEW_ROOT: int = Field(default=0, ge=0)

    # Logging (diagnostic; relative paths resolve against the working directory)
    STACKVIEW_LOG_DIR: Path = Field(default=Path("_logs"))
    STACKVIEW_LOG_LEVEL: str = Field(default="INFO")
    # Timed rotation retention count (days). Old log files are auto-deleted.
    STACKVIEW_LOG_BACKUP_COUNT: int = Field(default=7)

    # Row styles (rich style strings)
    STACKVIEW_ACTIVE_STYLE: str = Field(default="red")
    STACKVIEW_INFO_STYLE: str = Field(default="grey70")


def load_settings() -> Settings:
    return Settings()
