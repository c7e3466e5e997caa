from enum import Enum

from pydantic_settings import BaseSettings, SettingsConfigDict


class Env(str, Enum):
    DEV = "dev"
    HML = "hml"
    PROD = "prod"


class Settings(BaseSettings):
    APP_ENV: Env = Env.DEV
    DEBUG: bool = False

    DATABASE_URL: str = "sqlite:///./students.db"

    # subjects-service (peer)
    SUBJECTS_SERVICE_URL: str = "http://localhost:8081"
    SUBJECTS_SERVICE_PATH: str = "/subjects"
    SUBJECTS_TIMEOUT_SECONDS: float = 5.0

    ALLOWED_HOSTS: str = "localhost,127.0.0.1"

    LOG_JSON: bool = True
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env.dev",
        env_file_encoding="utf-8",
        extra="ignore",
    )


# cria instância global
settings = Settings()
