# src/core/init_data/parser.py
"""
Парсинг строки initData от Telegram WebApp.
https://core.telegram.org/bots/webapps#webappinitdata

Строгий к auth_date, мягкий к вложенным user/receiver/chat:
битый JSON вложенного поля отбрасывается, запись остаётся.
"""

from __future__ import annotations

import json
import re
from typing import Any, TypeVar
from urllib.parse import parse_qsl, unquote

from pydantic import BaseModel, ValidationError

from src.common.logger import get_logger
from src.core.init_data.models import InitData, WebAppChat, WebAppUser

logger = get_logger("init_data")

ModelT = TypeVar("ModelT", bound=BaseModel)

SCALAR_FIELDS = ("query_id", "chat_type", "chat_instance", "start_param")

DIGITS_PATTERN = re.compile(r"[0-9]+")


def parse_query(raw: str) -> dict[str, str]:
    """
    Разбирает URL-encoded строку в словарь.
    При повторе ключа побеждает первое вхождение.
    """
    params: dict[str, str] = {}
    for key, value in parse_qsl(raw, keep_blank_values=True):
        params.setdefault(key, value)
    return params


def _parse_int(value: str | None) -> int | None:
    """Только ASCII-цифры: знак, пробелы и "_" не допускаются."""
    if not value or not DIGITS_PATTERN.fullmatch(value):
        return None
    return int(value)


def _parse_nested(params: dict[str, str], field: str, model: type[ModelT]) -> ModelT | None:
    """Декодирует вложенный JSON; при ошибке логирует и возвращает None."""
    value = params.get(field)
    if not value:
        return None

    try:
        return model.model_validate(json.loads(unquote(value)))
    except (ValueError, RecursionError, ValidationError) as e:
        # json.JSONDecodeError — подкласс ValueError
        logger.warning(f"Не удалось разобрать поле {field} в initData: {type(e).__name__}")
        return None


def parse_init_data(raw: str) -> InitData | None:
    """
    Преобразует сырую строку initData в InitData.

    Args:
        raw: URL-encoded строка (window.Telegram.WebApp.initData)

    Returns:
        InitData или None, если нет auth_date или он не число.
        Исключения наружу не выходят.
    """
    try:
        params = parse_query(raw)

        auth_date = _parse_int(params.get("auth_date"))
        if auth_date is None:
            logger.debug("initData без корректного auth_date")
            return None

        fields: dict[str, Any] = {
            "auth_date": auth_date,
            "hash": params.get("hash") or "",
        }

        for name in SCALAR_FIELDS:
            if params.get(name):
                fields[name] = params[name]

        if params.get("can_send_after"):
            can_send_after = _parse_int(params["can_send_after"])
            if can_send_after is None:
                logger.warning("Некорректное значение can_send_after в initData")
            else:
                fields["can_send_after"] = can_send_after

        fields["user"] = _parse_nested(params, "user", WebAppUser)
        fields["receiver"] = _parse_nested(params, "receiver", WebAppUser)
        fields["chat"] = _parse_nested(params, "chat", WebAppChat)

        return InitData(**fields)

    except Exception as e:
        logger.error(f"Ошибка парсинга initData: {type(e).__name__}")
        return None
