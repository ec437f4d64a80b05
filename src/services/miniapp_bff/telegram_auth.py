# src/services/miniapp_bff/telegram_auth.py
"""
Аутентификация запросов Mini App по initData.
https://core.telegram.org/bots/webapps#validating-data-received-via-the-mini-app

В отличие от ядра (которое возвращает None/False), здесь каждая
причина отказа превращается в TelegramAuthError с понятным текстом.
"""

from __future__ import annotations

from src.common.constants import INIT_DATA_MAX_AGE_SECONDS
from src.core.init_data.models import InitData
from src.core.init_data.parser import parse_init_data, parse_query
from src.core.init_data.signature import verify_signature
from src.core.init_data.validation import is_expired, validate_user


class TelegramAuthError(Exception):
    """Ошибка валидации Telegram данных."""
    pass


def validate_init_data(
    init_data: str,
    bot_token: str,
    max_age_seconds: int = INIT_DATA_MAX_AGE_SECONDS,
    *,
    now: int | None = None,
) -> InitData:
    """
    Валидировать initData от Telegram Mini App.

    Args:
        init_data: URL-encoded строка от Telegram WebApp.initData
        bot_token: Токен бота
        max_age_seconds: Максимальный возраст данных (по умолчанию 24 часа)
        now: Текущее Unix-время (для тестов)

    Returns:
        InitData с валидным пользователем

    Raises:
        TelegramAuthError: Если данные невалидны или устарели
    """
    if not init_data:
        raise TelegramAuthError("Пустые initData")

    if not parse_query(init_data).get("hash"):
        raise TelegramAuthError("Отсутствует hash в initData")

    if not verify_signature(init_data, bot_token):
        raise TelegramAuthError("Невалидный hash initData")

    parsed = parse_init_data(init_data)
    if parsed is None:
        raise TelegramAuthError("Отсутствует auth_date в initData")

    if is_expired(parsed.auth_date, max_age_seconds, now=now):
        raise TelegramAuthError("initData устарели")

    if parsed.user is None:
        raise TelegramAuthError("Отсутствует user в initData")

    if not validate_user(parsed.user):
        raise TelegramAuthError("Некорректные данные пользователя в initData")

    return parsed
