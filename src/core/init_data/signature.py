# src/core/init_data/signature.py
"""
Проверка подписи initData (HMAC-SHA-256).
https://core.telegram.org/bots/webapps#validating-data-received-via-the-mini-app

secret_key = HMAC_SHA256(key="WebAppData", msg=bot_token)
hash       = hex(HMAC_SHA256(key=secret_key, msg=data_check_string))
"""

from __future__ import annotations

import hashlib
import hmac
import json
from typing import Any, Mapping
from urllib.parse import urlencode

from src.common.constants import INIT_DATA_MAX_AGE_SECONDS
from src.common.logger import get_logger
from src.core.init_data.models import InitData
from src.core.init_data.parser import parse_init_data, parse_query
from src.core.init_data.validation import create_data_check_string, is_expired

logger = get_logger("init_data")

WEB_APP_DATA_KEY = b"WebAppData"


def derive_secret_key(bot_token: str) -> bytes:
    """Секретный ключ, производный от токена бота."""
    return hmac.new(WEB_APP_DATA_KEY, bot_token.encode(), hashlib.sha256).digest()


def compute_init_data_hash(data_check_string: str, bot_token: str) -> str:
    """Ожидаемый hash для канонической строки."""
    return hmac.new(
        derive_secret_key(bot_token),
        data_check_string.encode(),
        hashlib.sha256,
    ).hexdigest()


def verify_signature(raw: str, bot_token: str) -> bool:
    """
    Совпадает ли hash из initData с вычисленным по токену бота.
    Сравнение выполняется за постоянное время.
    """
    if not bot_token or not raw:
        return False

    received_hash = parse_query(raw).get("hash", "")
    if not received_hash:
        return False

    calculated_hash = compute_init_data_hash(create_data_check_string(raw), bot_token)
    return hmac.compare_digest(calculated_hash, received_hash)


def sign_init_data(fields: Mapping[str, Any], bot_token: str) -> str:
    """
    Собирает подписанную строку initData.

    Значения-словари (user, receiver, chat) кодируются в компактный JSON.
    Используется в режиме разработки и в тестах.
    """
    params: dict[str, str] = {}
    for key, value in fields.items():
        if key == "hash" or value is None:
            continue
        if isinstance(value, Mapping):
            params[key] = json.dumps(dict(value), ensure_ascii=False, separators=(",", ":"))
        else:
            params[key] = str(value)

    data_check_string = "\n".join(f"{key}={params[key]}" for key in sorted(params))
    params["hash"] = compute_init_data_hash(data_check_string, bot_token)
    return urlencode(params)


def authenticate_init_data(
    raw: str,
    bot_token: str,
    *,
    max_age_seconds: int = INIT_DATA_MAX_AGE_SECONDS,
    now: int | None = None,
) -> InitData | None:
    """
    Полная аутентификация initData: подпись, структура, свежесть.

    Returns:
        InitData, если все проверки пройдены, иначе None.
    """
    if not verify_signature(raw, bot_token):
        logger.warning("Подпись initData не прошла проверку")
        return None

    init_data = parse_init_data(raw)
    if init_data is None or not init_data.hash:
        return None

    if is_expired(init_data.auth_date, max_age_seconds, now=now):
        logger.info("initData устарели")
        return None

    return init_data
