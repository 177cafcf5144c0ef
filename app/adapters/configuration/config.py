# app/adapters/configuration/config.py

from typing import Optional, List, Union
from logging import getLevelName
from pydantic import Field, field_validator, ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"

    # Environment
    ENVIRONMENT: str = "development"  # "development", "production", "testing"

    # Database
    DB_DRIVER: str = "asyncpg"
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_DB: str = "sakila"
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    TEST_MODE: bool = False
    TEST_POSTGRES_DB: str = ""
    DATABASE_URL: Optional[str] = Field(None, validate_default=True)

    DEBUG: bool = False

    # API key authentication
    API_KEY_HEADER: str = "X-API-Key"
    CLIENT_ID_HEADER: str = "X-Client-ID"
    API_KEY_LENGTH: int = 32
    API_KEY_PROTECTED_PREFIXES: List[str] = ["/api"]
    API_KEY_EXEMPT_PREFIXES: List[str] = [
        "/api/admin", "/docs", "/redoc", "/openapi.json",
        "/api-docs", "/swagger-ui", "/health", "/actuator",
    ]

    # Access log (audit trail)
    ACCESS_LOG_PREFIXES: List[str] = ["/api"]
    ACCESS_LOG_EXEMPT_PREFIXES: List[str] = ["/docs", "/redoc", "/openapi.json", "/api-docs", "/swagger-ui"]

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:8000", "http://127.0.0.1:8000"]

    @field_validator("DATABASE_URL", mode="before")
    def assemble_db_url(cls, value, info):
        if value:
            return value

        data = info.data
        db_name = data.get("TEST_POSTGRES_DB") if data.get("TEST_MODE") else data.get("POSTGRES_DB")
        return (
            f"postgresql+{data.get('DB_DRIVER', 'asyncpg')}://"
            f"{data['POSTGRES_USER']}:{data['POSTGRES_PASSWORD']}"
            f"@{data['POSTGRES_HOST']}:{data['POSTGRES_PORT']}/{db_name}"
        )

    @field_validator(
        "CORS_ORIGINS",
        "API_KEY_PROTECTED_PREFIXES",
        "API_KEY_EXEMPT_PREFIXES",
        "ACCESS_LOG_PREFIXES",
        "ACCESS_LOG_EXEMPT_PREFIXES",
        mode="before",
    )
    def assemble_csv_list(cls, v: Union[str, List[str]]) -> List[str]:
        """
        Se vier como string CSV (ex: 'a,b,c'), transforma em lista.
        Se vier já como lista ou JSON, retorna como está.
        """
        if isinstance(v, str) and not v.startswith("["):
            return [item.strip() for item in v.split(",") if item.strip()]
        if isinstance(v, list):
            return v
        raise ValueError(f"Lista inválida: {v!r}")

    @field_validator("LOG_LEVEL", mode="before")
    def validate_log_level(cls, v: str) -> str:
        """Garante que o valor é um nível válido do logging"""
        lvl = v.upper()
        getLevelName(lvl)  # valida
        return lvl

    model_config = ConfigDict(env_file=".env")


settings = Settings()
