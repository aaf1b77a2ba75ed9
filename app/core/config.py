from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///./docshare.db"
    secret_token: str
    jwt_algorithm: str = "HS256"

    log_level: str = "INFO"
    sql_echo: bool = False
    # Создавать таблицы при старте (для PostgreSQL в продакшене выключать)
    create_tables: bool = True
    cors_origins: List[str] = ["*"]

    model_config = {"env_file": ".env", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    """Настройки приложения из окружения"""
    return Settings()
