# logitrack/adapters/configuration/config.py

from typing import Optional
from logging import getLevelName
from pydantic import Field, field_validator, ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"

    # Environment
    ENVIRONMENT: str = "development"  # "development", "production", "testing"
    DEBUG: bool = False

    # Storage backend: "LOCAL" (arquivo JSON) ou "SQL" (banco relacional)
    DB_PROVIDER: str = "LOCAL"
    LOCAL_STORAGE_PATH: str = "data/logitrack.json"
    STORAGE_PREFIX: str = "logitrack_"

    # Database
    POSTGRES_USER: Optional[str] = None
    POSTGRES_PASSWORD: Optional[str] = None
    POSTGRES_DB: Optional[str] = None
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    DATABASE_URL: Optional[str] = Field(default=None, validate_default=True)

    # Auth
    SECRET_KEY: str = "change-me"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 12

    # Administrador criado quando não há usuários
    ADMIN_NAME: str = "Administrador"
    ADMIN_EMAIL: str = "admin@logitrack.com"
    ADMIN_PASSWORD: str = "admin123"

    # Backups
    BACKUP_TIMEOUT_SECONDS: float = 30.0

    @field_validator("DB_PROVIDER", mode="before")
    def validate_db_provider(cls, v: str) -> str:
        provider = str(v).upper()
        if provider not in ("LOCAL", "SQL"):
            raise ValueError(f"DB_PROVIDER inválido: {v!r}")
        return provider

    @field_validator("DATABASE_URL", mode="before")
    def assemble_db_url(cls, value, info):
        if value:
            return value

        data = info.data
        if not data.get("POSTGRES_USER") or not data.get("POSTGRES_DB"):
            return None
        return (
            f"postgresql+asyncpg://{data['POSTGRES_USER']}:{data.get('POSTGRES_PASSWORD') or ''}"
            f"@{data.get('POSTGRES_HOST', 'localhost')}:{data.get('POSTGRES_PORT', 5432)}/{data['POSTGRES_DB']}"
        )

    @field_validator("LOG_LEVEL", mode="before")
    def validate_log_level(cls, v: str) -> str:
        """Garante que o valor é um nível válido do logging"""
        lvl = v.upper()
        getLevelName(lvl)  # valida
        return lvl

    model_config = ConfigDict(env_file=".env")


settings = Settings()
