# src/core/init_data/validation.py
"""
Проверки initData: структура, свежесть, форма пользователя.

Здесь нет проверки подписи — её выполняет signature.authenticate_init_data().
Результат validate_basic() сам по себе не является аутентификацией.
"""

from __future__ import annotations

import time
from typing import Any
from urllib.parse import parse_qsl

from src.common.constants import (
    DEFAULT_LANGUAGE_CODE,
    INIT_DATA_MAX_AGE_SECONDS,
    MAX_FIRST_NAME_LENGTH,
    MAX_LAST_NAME_LENGTH,
    MAX_USERNAME_LENGTH,
)
from src.core.init_data.models import InitData, SafeUser, WebAppUser

REDACTED = "***"


def _now_seconds() -> int:
    return int(time.time())


def is_expired(
    auth_date: int,
    max_age_seconds: int = INIT_DATA_MAX_AGE_SECONDS,
    *,
    now: int | None = None,
) -> bool:
    """
    Истёк ли срок действия initData.

    Граница не считается истечением: now - auth_date == max_age -> False.
    """
    current = _now_seconds() if now is None else now
    return current - auth_date > max_age_seconds


def validate_basic(init_data: InitData | None, *, now: int | None = None) -> bool:
    """Есть hash и auth_date, данные не старше 24 часов."""
    if init_data is None:
        return False

    if not init_data.hash or not init_data.auth_date:
        return False

    return not is_expired(init_data.auth_date, INIT_DATA_MAX_AGE_SECONDS, now=now)


def validate_user(user: WebAppUser | None) -> bool:
    """
    Проверка формы пользователя.

    Невалиден, если: нет пользователя, id не положительное целое,
    пустое имя, превышены длины first_name/last_name (64) или username (32).
    """
    if user is None:
        return False

    if not isinstance(user.id, int) or isinstance(user.id, bool) or user.id <= 0:
        return False

    if not user.first_name:
        return False

    if len(user.first_name) > MAX_FIRST_NAME_LENGTH:
        return False
    if user.last_name and len(user.last_name) > MAX_LAST_NAME_LENGTH:
        return False
    if user.username and len(user.username) > MAX_USERNAME_LENGTH:
        return False

    return True


def get_safe_user_data(user: WebAppUser | None) -> SafeUser:
    """Нормализованные данные пользователя; для невалидного — пустая запись."""
    if user is None or not validate_user(user):
        return SafeUser()

    return SafeUser(
        id=user.id,
        first_name=user.first_name or "",
        last_name=user.last_name or "",
        username=user.username or "",
        language_code=user.language_code or DEFAULT_LANGUAGE_CODE,
        is_premium=bool(user.is_premium),
    )


def create_data_check_string(raw: str) -> str:
    """
    Каноническая строка для проверки подписи.

    Все пары кроме hash, отсортированные по ключу, в виде key=value через \\n.
    Сортировка стабильная, поэтому результат не зависит от порядка параметров.
    """
    pairs = [(key, value) for key, value in parse_qsl(raw, keep_blank_values=True) if key != "hash"]
    pairs.sort(key=lambda pair: pair[0])
    return "\n".join(f"{key}={value}" for key, value in pairs)


def create_safe_logging_view(init_data: InitData | None) -> dict[str, Any] | None:
    """
    Представление initData для логов без персональных данных.
    Никогда не содержит hash, username и имён.
    """
    if init_data is None:
        return None

    user = init_data.user
    return {
        "has_user": user is not None,
        "has_query": bool(init_data.query_id),
        "has_chat": init_data.chat is not None,
        "auth_date": init_data.auth_date,
        "chat_type": init_data.chat_type,
        "start_param": REDACTED if init_data.start_param else None,
        "user_language": user.language_code if user else None,
        "user_id": REDACTED if user and user.id else None,
    }
