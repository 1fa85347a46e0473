# smartbarber/config.py

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    database_url: str = "sqlite:///./smartbarber.db"
    sql_echo: bool = False

    secret_key: str = "change-me-later"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 24 * 60

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="SMARTBARBER_",
        env_file=BASE_DIR / ".env",
        extra="ignore",
    )


settings = Settings()
