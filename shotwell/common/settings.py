# shotwell/common/settings.py
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _to_bool(v: str | bool | int | None, default: bool = False) -> bool:
    if isinstance(v, bool):
        return v
    if v is None:
        return default
    s = str(v).strip().lower()
    return s in {"1", "true", "yes", "y", "on"}


class DBConfig(BaseModel):
    # Path of the Shotwell sqlite file (usually ~/.local/share/shotwell/data/photo.db)
    path: Optional[Path] = None
    echo: bool = False


class Settings(BaseSettings):
    # -------- App / Env --------
    app_name: str = "shotwell"
    log_level: str = "INFO"

    # -------- Storage --------
    db: DBConfig = DBConfig()

    # -------- Tagging --------
    # When true, a reconcile touching several tags commits once (rolls back on error)
    # instead of committing each tag row as it is written.
    atomic_reconcile: bool = False

    model_config = SettingsConfigDict(
        env_prefix="SHOTWELL_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("atomic_reconcile", mode="before")
    @classmethod
    def _boolify(cls, v):
        return _to_bool(v)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Use this everywhere you need config:
        from shotwell.common.settings import get_settings
        cfg = get_settings()
    """
    return Settings()
