"""Centralized configuration with environment-variable overrides."""
from dataclasses import dataclass
import os

def _env(key: str, default: str) -> str:
    """Read an environment variable with a fallback."""
    return os.getenv(key, default)

@dataclass(frozen=True)
class Settings:
    """Application settings (override via env vars). The endpoint is fixed and not listed here."""
    app_name: str
    log_level: str

    @staticmethod
    def from_env() -> "Settings":
        """Build settings from environment variables."""
        return Settings(
            app_name=_env("APP_NAME", "postfetch"),
            log_level=_env("LOG_LEVEL", "INFO").upper(),
        )
