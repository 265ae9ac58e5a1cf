"""Settings for the checklist panel, loaded from environment variables (+ optional .env)."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # === API ===
    api_base_url: str = "http://localhost:8000"
    request_timeout_s: float | None = None  # None keeps the httpx default

    # === Logging ===
    log_level: str = "INFO"
    log_dir: Path | None = None

    # === Panel texts ===
    panel_title: str = "Travel Checklist"
    input_placeholder: str = "e.g. Prepare passport"
    empty_message: str = "No tasks yet."

    # === Toasts ===
    success_toast_ms: int = 2000
    error_toast_ms: int = 5000

    model_config = SettingsConfigDict(env_prefix="CHECKLIST_", env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
