# src/config/loader.py
"""
Загрузчик конфигурации проекта.
Единственный источник истины — config/config.json.
Секретные данные (BOT_TOKEN) переопределяются из переменных окружения.
"""

from __future__ import annotations

import json
import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.common.constants import INIT_DATA_MAX_AGE_SECONDS, ColorScheme


# =============================================================================
# ОПРЕДЕЛЕНИЕ ПУТЕЙ
# =============================================================================

def get_project_root() -> Path:
    """Возвращает корневую директорию проекта."""
    return Path(__file__).parent.parent.parent


def get_config_path() -> Path:
    """Возвращает путь к файлу конфигурации."""
    return get_project_root() / "config" / "config.json"


def load_config_json() -> dict[str, Any]:
    """Загружает config.json и возвращает словарь без ключей-комментариев."""
    config_path = get_config_path()
    if not config_path.exists():
        raise FileNotFoundError(f"Файл конфигурации не найден: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = json.load(f)

    return {k: v for k, v in data.items() if not k.startswith("_comment_")}


# =============================================================================
# PYDANTIC МОДЕЛИ КОНФИГУРАЦИИ
# =============================================================================

class SystemSettings(BaseModel):
    """Системные настройки."""
    PROJECT_NAME: str = "tg_event_miniapp"
    VERSION: str = "1.0.0"
    DEBUG: bool = True
    LOG_LEVEL: str = "DEBUG"
    ENVIRONMENT: str = "development"


class DeploymentSettings(BaseModel):
    """Настройки развертывания компонентов."""
    MINIAPP_BFF_HOST: str = "miniapp_bff"
    MINIAPP_BFF_PORT: int = 8088
    WEB_CLIENT_PORT: int = 8082


class LoggingSettings(BaseModel):
    """Настройки логирования."""
    LOG_LEVEL: str = "DEBUG"
    LOG_TO_FILE: bool = False
    LOG_FILE_PATH: str = "logs/app.log"
    LOG_FORMAT: str = "colored"
    LOG_MAX_BYTES: int = 10485760
    LOG_BACKUP_COUNT: int = 5

    @field_validator("LOG_FORMAT")
    @classmethod
    def check_format(cls, v: str) -> str:
        """Допустимы только json и colored."""
        if v not in ("json", "colored"):
            raise ValueError(f"Неизвестный формат логов: {v}")
        return v


class TelegramSettings(BaseModel):
    """Настройки Telegram Mini App."""
    BOT_TOKEN: str = ""
    INIT_DATA_MAX_AGE_SECONDS: int = INIT_DATA_MAX_AGE_SECONDS
    WEBAPP_HOST: str = "0.0.0.0"
    # Разрешить подписанные тестовые initData вне Telegram (только DEBUG)
    ALLOW_DEV_INIT_DATA: bool = False

    @field_validator("BOT_TOKEN", mode="before")
    @classmethod
    def get_from_env(cls, v: str) -> str:
        """Получает токен из переменных окружения, если не задан."""
        if not v:
            return os.getenv("BOT_TOKEN", "")
        return v

    @field_validator("INIT_DATA_MAX_AGE_SECONDS")
    @classmethod
    def check_max_age(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("INIT_DATA_MAX_AGE_SECONDS должен быть положительным")
        return v


class ThemeSettings(BaseModel):
    """Настройки темы по умолчанию."""
    DEFAULT_COLOR_SCHEME: ColorScheme = ColorScheme.LIGHT


# =============================================================================
# ГЛАВНЫЙ КЛАСС НАСТРОЕК
# =============================================================================

class Settings(BaseSettings):
    """
    Главный класс настроек приложения.
    Агрегирует все секции конфигурации.
    """
    system: SystemSettings = SystemSettings()
    deployment: DeploymentSettings = DeploymentSettings()
    logging: LoggingSettings = LoggingSettings()
    telegram: TelegramSettings = TelegramSettings()
    theme: ThemeSettings = ThemeSettings()

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @classmethod
    def from_config_json(cls) -> "Settings":
        """
        Создаёт объект Settings из config.json.
        Секреты и адреса переопределяются из переменных окружения.
        """
        data = load_config_json()

        return cls(
            system=SystemSettings(
                PROJECT_NAME=data.get("PROJECT_NAME", "tg_event_miniapp"),
                VERSION=data.get("VERSION", "1.0.0"),
                DEBUG=data.get("DEBUG", True),
                LOG_LEVEL=data.get("LOG_LEVEL", "DEBUG"),
                ENVIRONMENT=os.getenv("ENVIRONMENT", data.get("ENVIRONMENT", "development")),
            ),
            deployment=DeploymentSettings(
                MINIAPP_BFF_HOST=os.getenv("MINIAPP_BFF_HOST", data.get("MINIAPP_BFF_HOST", "miniapp_bff")),
                MINIAPP_BFF_PORT=int(os.getenv("MINIAPP_BFF_PORT", data.get("MINIAPP_BFF_PORT", 8088))),
                WEB_CLIENT_PORT=int(os.getenv("WEB_CLIENT_PORT", data.get("WEB_CLIENT_PORT", 8082))),
            ),
            logging=LoggingSettings(
                LOG_LEVEL=data.get("LOG_LEVEL", "DEBUG"),
                LOG_TO_FILE=data.get("LOG_TO_FILE", False),
                LOG_FILE_PATH=data.get("LOG_FILE_PATH", "logs/app.log"),
                LOG_FORMAT=data.get("LOG_FORMAT", "colored"),
                LOG_MAX_BYTES=data.get("LOG_MAX_BYTES", 10485760),
                LOG_BACKUP_COUNT=data.get("LOG_BACKUP_COUNT", 5),
            ),
            telegram=TelegramSettings(
                BOT_TOKEN=os.getenv("BOT_TOKEN", data.get("BOT_TOKEN", "")),
                INIT_DATA_MAX_AGE_SECONDS=data.get("INIT_DATA_MAX_AGE_SECONDS", INIT_DATA_MAX_AGE_SECONDS),
                WEBAPP_HOST=data.get("WEBAPP_HOST", "0.0.0.0"),
                ALLOW_DEV_INIT_DATA=data.get("ALLOW_DEV_INIT_DATA", False),
            ),
            theme=ThemeSettings(
                DEFAULT_COLOR_SCHEME=data.get("DEFAULT_COLOR_SCHEME", ColorScheme.LIGHT),
            ),
        )


@lru_cache()
def get_settings() -> Settings:
    """
    Возвращает синглтон настроек приложения.
    Перед чтением config.json подгружает .env из корня проекта.
    """
    from dotenv import load_dotenv

    env_path = get_project_root() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    return Settings.from_config_json()


# Экспорт синглтона для удобного импорта
settings = get_settings()
