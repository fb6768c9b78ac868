from __future__ import annotations

from pathlib import Path
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

ROOT = Path(__file__).resolve().parents[1]
ENV_FILE = ROOT / "env" / ".env.test"


class TestSettings(BaseSettings):
    DATABASE_URL: str = "sqlite+aiosqlite:///./test_depreciation.db"
    APP_ENV: str = "test"
    DEBUG: bool = False
    LOG_LEVEL: str = "WARNING"
    CREATE_TABLES_ON_STARTUP: bool = False

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE) if ENV_FILE.exists() else None,
        env_file_encoding="utf-8",
    )
