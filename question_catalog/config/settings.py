# -*- coding: utf-8 -*-
"""
question_catalog/config/settings.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Конфигурация настроек приложения с использованием Pydantic.

Настройки читаются из переменных окружения и (если существует) из .env файла
в корне проекта. Отсутствие строки подключения к базе данных приводит к
ошибке валидации при старте приложения.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Корень проекта (каталог с pyproject.toml)
BASE_DIR = Path(__file__).resolve().parent.parent.parent

ENV_PATH = (BASE_DIR / ".env").resolve()


class Settings(BaseSettings):
    """Настройки приложения, загружаемые из окружения и .env файла."""

    model_config = SettingsConfigDict(
        env_file=ENV_PATH if ENV_PATH.exists() else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Конфигурация базы данных
    database_url: str
    db_echo: bool = False

    # Конфигурация приложения
    app_host: str = "0.0.0.0"
    app_port: int = Field(
        default=3001,
        validation_alias=AliasChoices("app_port", "port"),
    )
    app_env: str = "production"

    # Конфигурация логирования
    log_level: str = "INFO"

    # Конфигурация CORS
    cors_allow_origins: str = "*"

    @property
    def is_development(self) -> bool:
        """Режим разработки: в ответах об ошибках отдаются детали."""
        return self.app_env.lower() == "development"

    def get_allowed_origins(self) -> list[str]:
        """Формирует список разрешённых origins для CORS."""
        origins = [
            origin.strip()
            for origin in self.cors_allow_origins.split(",")
            if origin.strip()
        ]
        return origins or ["*"]

    def get_config_source(self) -> str:
        """Возвращает информацию об источнике конфигурации для отладки."""
        if ENV_PATH.exists():
            return f"env file: {ENV_PATH}"
        return "environment variables only"


@lru_cache
def get_settings() -> Settings:
    """Возвращает настройки процесса (создаются один раз)."""
    return Settings()
