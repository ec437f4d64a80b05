"""
Домен initData Telegram Mini App.
Парсинг, проверки структуры и свежести, проверка подписи.
"""

from src.core.init_data.models import InitData, SafeUser, WebAppChat, WebAppUser
from src.core.init_data.parser import parse_init_data
from src.core.init_data.signature import authenticate_init_data, sign_init_data, verify_signature
from src.core.init_data.validation import (
    create_data_check_string,
    create_safe_logging_view,
    get_safe_user_data,
    is_expired,
    validate_basic,
    validate_user,
)

__all__ = [
    "InitData",
    "SafeUser",
    "WebAppChat",
    "WebAppUser",
    "parse_init_data",
    "authenticate_init_data",
    "sign_init_data",
    "verify_signature",
    "create_data_check_string",
    "create_safe_logging_view",
    "get_safe_user_data",
    "is_expired",
    "validate_basic",
    "validate_user",
]
