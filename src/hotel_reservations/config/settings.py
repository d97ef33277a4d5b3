"""Runtime configuration for the reservation console.

Relies on pydantic-settings so that environment variables (prefixed with ``HOTEL_``)
can override defaults. See `.env.example` for common values.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Captures runtime configuration for the console and booking services."""

    log_level: str = Field(default="WARNING")
    log_dir: Path = Field(default=Path("data/logs"), description="Directory that receives hotel.log")
    inventory_path: Optional[Path] = Field(
        default=None, description="TOML file with rooms and customers to load at start-up"
    )
    recommendation_step_days: int = Field(
        default=7, description="Days to shift both dates on each alternative-date attempt"
    )
    recommendation_max_attempts: int = Field(
        default=12, description="Shifted windows to try before reporting no availability"
    )

    model_config = SettingsConfigDict(
        env_prefix="HOTEL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_dir", mode="before")
    def _expand_log_dir(cls, value: str | Path) -> Path:
        if isinstance(value, Path):
            return value.expanduser()
        return Path(value).expanduser()

    @field_validator("inventory_path", mode="before")
    def _expand_inventory_path(cls, value: str | Path | None) -> Optional[Path]:
        if value in (None, ""):
            return None
        return Path(value).expanduser()

    @field_validator("recommendation_step_days", "recommendation_max_attempts")
    def _validate_positive(cls, value: int, info) -> int:  # noqa: ANN001
        if value <= 0:
            raise ValueError(f"{info.field_name} must be positive")
        return value

    def ensure_directories(self) -> None:
        """Create directories that must exist at runtime."""
        self.log_dir.mkdir(parents=True, exist_ok=True)
