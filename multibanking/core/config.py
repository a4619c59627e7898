from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_file: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="MB_",
        extra="ignore",
        env_file_encoding="utf-8",
    )


settings = Settings()
