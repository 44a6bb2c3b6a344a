"""Settings for SiteKeeper."""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    data_dir: Path = Path.home() / ".sitekeeper"
    db_path: Optional[Path] = None
    slot_name: str = "website-store"
    seed_on_first_run: bool = True
    submit_delay: float = Field(default=0.0, ge=0)
    log_level: str = "warning"

    model_config = SettingsConfigDict(
        env_prefix="SITEKEEPER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @model_validator(mode="after")
    def default_db_path(self) -> "Settings":
        if self.db_path is None:
            self.db_path = self.data_dir / "sitekeeper.db"
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
