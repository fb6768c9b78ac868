from __future__ import annotations

from pathlib import Path
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

from config.database import get_sqlite_url

ROOT = Path(__file__).resolve().parents[1]
ENV_FILE = ROOT / "env" / ".env.local"
DATA_DIR = ROOT / "data"


class LocalSettings(BaseSettings):
    DATABASE_URL: str = get_sqlite_url(DATA_DIR / "depreciation.db")
    APP_ENV: str = "local"
    DEBUG: bool = True
    LOG_LEVEL: str = "DEBUG"
    # Single-user desktop deployments create tables on startup
    CREATE_TABLES_ON_STARTUP: bool = True

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE) if ENV_FILE.exists() else None,
        env_file_encoding="utf-8",
    )
