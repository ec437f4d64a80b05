# tests/conftest.py
"""
Общие фикстуры и настройки для тестов.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Callable
from urllib.parse import urlencode

import pytest

# Устанавливаем переменные окружения перед импортом модулей
os.environ.setdefault("BOT_TOKEN", "test_bot_token")

from src.core.init_data.signature import sign_init_data  # noqa: E402

# Фиксированное "сейчас" для проверок свежести
NOW = 1_700_000_000


# =============================================================================
# ФИКСТУРЫ КОНФИГУРАЦИИ
# =============================================================================

@pytest.fixture(scope="session")
def project_root() -> Path:
    """Корневая директория проекта."""
    return Path(__file__).parent.parent


@pytest.fixture
def bot_token() -> str:
    """Токен бота, которым подписываются тестовые initData."""
    return os.environ["BOT_TOKEN"]


@pytest.fixture
def mock_config() -> dict[str, Any]:
    """Мок config.json для тестов."""
    return {
        "_comment_system": "комментарий",
        "PROJECT_NAME": "tg_event_miniapp_test",
        "VERSION": "1.0.0-test",
        "DEBUG": False,
        "LOG_LEVEL": "INFO",
        "ENVIRONMENT": "test",
        "MINIAPP_BFF_PORT": 9088,
        "WEB_CLIENT_PORT": 9082,
        "LOG_TO_FILE": False,
        "LOG_FORMAT": "json",
        "BOT_TOKEN": "",
        "INIT_DATA_MAX_AGE_SECONDS": 3600,
        "ALLOW_DEV_INIT_DATA": True,
        "DEFAULT_COLOR_SCHEME": "dark",
    }


@pytest.fixture
def temp_config_file(tmp_path: Path, mock_config: dict[str, Any]) -> Path:
    """Создаёт временный файл конфигурации."""
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps(mock_config, ensure_ascii=False, indent=2))
    return config_file


# =============================================================================
# ФИКСТУРЫ INITDATA
# =============================================================================

@pytest.fixture
def now() -> int:
    return NOW


@pytest.fixture
def sample_user() -> dict[str, Any]:
    """Пользователь Telegram из initData."""
    return {
        "id": 123456789,
        "first_name": "Тест",
        "last_name": "Пользователь",
        "username": "test_user",
        "language_code": "ru",
        "is_premium": True,
        "allows_write_to_pm": True,
    }


@pytest.fixture
def sample_chat() -> dict[str, Any]:
    return {"id": -100123, "type": "supergroup", "title": "Event chat"}


@pytest.fixture
def make_raw() -> Callable[..., str]:
    """Неподписанная строка initData из полей (словари кодируются в JSON)."""

    def _make(**fields: Any) -> str:
        params = {
            key: json.dumps(value, ensure_ascii=False) if isinstance(value, dict) else str(value)
            for key, value in fields.items()
        }
        return urlencode(params)

    return _make


@pytest.fixture
def signed_raw(bot_token: str, sample_user: dict[str, Any], now: int) -> Callable[..., str]:
    """Подписанная строка initData; поля по умолчанию можно переопределить."""

    def _make(**overrides: Any) -> str:
        fields: dict[str, Any] = {
            "query_id": "AAHdF6IQAAAAAN0XohDhrOrc",
            "user": sample_user,
            "auth_date": now,
        }
        fields.update(overrides)
        return sign_init_data(fields, bot_token)

    return _make
