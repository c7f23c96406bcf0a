"""
Central configuration via pydantic-settings.
Values are read from TIGERCLUB_* environment variables only; no files.
Nothing is required: a plain run works without any environment, and an
unrecognised value falls back to its default instead of stopping the form.
"""
from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_FALSE = ("0", "false", "no", "n", "off")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TIGERCLUB_",
        extra="ignore",
    )

    # ── Logging ───────────────────────────────────────────────────────────────
    # Log lines go to stderr; the form itself owns stdout.
    LOG_LEVEL: str = "WARNING"

    # ── Console ───────────────────────────────────────────────────────────────
    # Wait for a final acknowledgement before the process exits
    PAUSE_ON_EXIT: bool = True

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def validate_log_level(cls, v: object) -> str:
        """Uppercase a known level name; anything else becomes WARNING."""
        level = str(v).strip().upper() if v is not None else ""
        return level if level in _LOG_LEVELS else "WARNING"

    @field_validator("PAUSE_ON_EXIT", mode="before")
    @classmethod
    def validate_pause_on_exit(cls, v: object) -> bool:
        if isinstance(v, bool):
            return v
        value = str(v).strip().lower()
        if value in _FALSE:
            return False
        # Unparseable values keep the pause so the exit prompt still waits
        return True

    @property
    def log_level_name(self) -> str:
        """Level name for logging.basicConfig."""
        return self.LOG_LEVEL


settings = Settings()
