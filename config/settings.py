"""
scarcentral - Configuration Settings
=====================================
Pydantic BaseSettings for catalogue export and logging.
All values can be overridden via environment variables with the SCARCENTRAL_ prefix.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ScarSettings(BaseSettings):
    """Central configuration for scarcentral tooling."""

    model_config = SettingsConfigDict(
        env_prefix="SCARCENTRAL_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Paths ────────────────────────────────────────────────────────────
    # Resolved against the working directory when settings load
    EXPORT_DIR: Path = Field(default_factory=lambda: Path.cwd() / "data")
    EXPORT_JSON_FILENAME: str = "scarcentral.json"

    # ── Export ───────────────────────────────────────────────────────────
    JSON_INDENT: int = 2
    EXPORT_FORMAT_NAME: str = "scarcentral-catalogue"
    EXPORT_FORMAT_VERSION: str = "1.0.0"

    # ── Logging ──────────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"

    @property
    def export_json_path(self) -> Path:
        return self.EXPORT_DIR / self.EXPORT_JSON_FILENAME


# ── Singleton ────────────────────────────────────────────────────────────
settings = ScarSettings()
