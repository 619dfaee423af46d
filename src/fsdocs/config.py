"""Configuration management for the document store."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .store.models import ConfinementMode
from .store.naming import DEFAULT_MAX_SUFFIX


class Settings(BaseSettings):
    """Centralised runtime configuration for a document store."""

    model_config = SettingsConfigDict(
        env_prefix="FSDOCS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_assignment=True,
    )

    root_dir: Path = Field(
        default_factory=lambda: Path.cwd() / "data" / "documents",
        description="Confinement root; relative values are taken against the working directory.",
    )
    confinement: ConfinementMode = Field(default=ConfinementMode.STRICT)
    absolute_results: bool = Field(
        default=False,
        description="Return absolute paths from create/update/delete instead of root-relative ones.",
    )
    exclusive_create: bool = Field(
        default=False,
        description="Claim new names with an atomic exclusive create instead of probing.",
    )
    max_suffix: int = Field(default=DEFAULT_MAX_SUFFIX, ge=1)

    @field_validator("root_dir", mode="before")
    @classmethod
    def _normalise_root_dir(cls, value: Path | str) -> Path:
        candidate = Path(value) if not isinstance(value, Path) else value
        if candidate.is_absolute():
            return candidate
        return Path.cwd() / candidate


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance and ensure the root directory exists."""
    settings = Settings()
    if settings.confinement.confined:
        settings.root_dir.mkdir(parents=True, exist_ok=True)
    return settings
