# src/services/miniapp_bff/dependencies.py
"""
Dependency Injection для MiniApp BFF.
"""

from __future__ import annotations

from src.common.constants import INIT_DATA_MAX_AGE_SECONDS
from src.core.theme.resolver import ThemeResolver


# Синглтоны
_bot_token: str = ""
_max_age_seconds: int = INIT_DATA_MAX_AGE_SECONDS
_theme_resolver: ThemeResolver | None = None


def init_dependencies(
    bot_token: str,
    max_age_seconds: int = INIT_DATA_MAX_AGE_SECONDS,
) -> None:
    """Инициализировать зависимости при старте приложения."""
    global _bot_token, _max_age_seconds, _theme_resolver
    _bot_token = bot_token
    _max_age_seconds = max_age_seconds
    _theme_resolver = ThemeResolver()


def get_bot_token() -> str:
    """Получить токен бота для валидации initData."""
    if not _bot_token:
        raise RuntimeError("Bot token не установлен. Вызовите init_dependencies()")
    return _bot_token


def get_max_age_seconds() -> int:
    """Максимальный возраст initData."""
    return _max_age_seconds


def get_theme_resolver() -> ThemeResolver:
    """Получить резолвер темы."""
    if _theme_resolver is None:
        raise RuntimeError("ThemeResolver не инициализирован. Вызовите init_dependencies()")
    return _theme_resolver


def cleanup_dependencies() -> None:
    """Очистить ресурсы при остановке приложения."""
    global _bot_token, _theme_resolver
    _bot_token = ""
    _theme_resolver = None
