from __future__ import annotations

from typing import Literal

from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    KV_BACKEND: Literal["redis", "postgres"] = "redis"

    REDIS_URL: str = "redis://localhost:6379/0"

    POSTGRES_USER: str = "lostfound"
    POSTGRES_PASSWORD: str = ""
    POSTGRES_DB: str = "lostfound"
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432

    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20
    DB_POOL_RECYCLE: int = 300

    JWT_SECRET: str = ""
    JWT_VERIFY_MODE: Literal["hs256", "jwks"] = "hs256"
    JWT_ALGORITHM: str = "HS256"
    JWT_AUDIENCE: str | None = None
    JWKS_URL: str | None = None

    CORS_ORIGINS: list[str] = ["*"]

    CLIENT_POLL_INTERVAL_SECONDS: int = 3
    MESSAGE_MAX_LENGTH: int = 4000

    LOG_LEVEL: str = "INFO"

    @property
    def database_url(self) -> str:
        return (
            f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.POSTGRES_DB}"
        )

    model_config = ConfigDict(
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
