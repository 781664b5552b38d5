"""Configuration settings for Tasklist."""

from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8080
    api_reload: bool = False
    cors_origins: List[str] = ["*"]

    # Logging
    log_level: str = "INFO"
    log_file: str = ""  # Empty means console only

    model_config = SettingsConfigDict(
        env_prefix="TASKLIST_",
        env_file=".env",
        env_file_encoding="utf-8"
    )


settings = Settings()
