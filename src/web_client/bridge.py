# src/web_client/bridge.py
"""
Мост между NiceGUI и window.Telegram.WebApp в браузере клиента.

- NiceGuiDocumentRoot: запись CSS-переменных в document.documentElement
- read_host_state: initData, тема и User-Agent из браузера
- build_context: аутентификация и сборка WebAppContext
"""

from __future__ import annotations

import json
from typing import Any, Optional

from nicegui import Client
from pydantic import BaseModel, ValidationError, field_validator

from src.common.constants import ColorScheme
from src.common.logger import get_logger
from src.core.init_data.signature import authenticate_init_data
from src.core.platform.service import detect_platform
from src.core.theme.models import ThemeParams
from src.core.webapp.context import WebAppContext, build_dev_init_data

logger = get_logger("web_client")

THEME_CHANGED_EVENT = "tg_theme_changed"

HOST_STATE_JS = """
const webApp = window.Telegram?.WebApp;
return {
    init_data: webApp?.initData || "",
    theme_params: webApp?.themeParams || {},
    color_scheme: webApp?.colorScheme || null,
    user_agent: navigator.userAgent || "",
};
"""

SUBSCRIBE_THEME_JS = f"""
const webApp = window.Telegram?.WebApp;
if (webApp) {{
    webApp.ready();
    webApp.onEvent('themeChanged', () => emitEvent('{THEME_CHANGED_EVENT}', {{
        theme_params: webApp.themeParams || {{}},
        color_scheme: webApp.colorScheme || null,
    }}));
}}
"""


class HostState(BaseModel):
    """Состояние WebApp, прочитанное из браузера."""
    init_data: str = ""
    theme_params: ThemeParams = ThemeParams()
    color_scheme: Optional[ColorScheme] = None
    user_agent: str = ""

    @field_validator("color_scheme", mode="before")
    @classmethod
    def drop_unknown_scheme(cls, v: Any) -> Any:
        """Неизвестная схема считается отсутствующей."""
        if v not in (ColorScheme.LIGHT.value, ColorScheme.DARK.value):
            return None
        return v

    @field_validator("theme_params", mode="before")
    @classmethod
    def keep_string_values(cls, v: Any) -> Any:
        """Хост может прислать не только строки; берём только строки."""
        if not isinstance(v, dict):
            return {}
        return {key: value for key, value in v.items() if isinstance(value, str)}


def parse_host_state(payload: Any) -> HostState:
    """Разбирает ответ JS; при мусоре возвращает пустое состояние."""
    if not isinstance(payload, dict):
        return HostState()
    try:
        return HostState.model_validate(payload)
    except ValidationError as e:
        logger.warning(f"Некорректное состояние WebApp от клиента: {e.error_count()} ошибок")
        return HostState()


class NiceGuiDocumentRoot:
    """
    Стиль document.documentElement в браузере клиента NiceGUI.
    Без активного соединения запись не выполняется.
    """

    def __init__(self, client: Client) -> None:
        self._client = client

    def _run(self, js: str) -> None:
        if not self._client.has_socket_connection:
            return
        self._client.run_javascript(js)

    def set_property(self, name: str, value: str) -> None:
        self._run(f"document.documentElement.style.setProperty({json.dumps(name)}, {json.dumps(value)});")

    def remove_property(self, name: str) -> None:
        self._run(f"document.documentElement.style.removeProperty({json.dumps(name)});")


async def read_host_state(client: Client, timeout: float = 5.0) -> HostState:
    """Читает initData, тему и User-Agent из браузера."""
    payload = await client.run_javascript(HOST_STATE_JS, timeout=timeout)
    return parse_host_state(payload)


def subscribe_theme_changes(client: Client) -> None:
    """Пересылает событие themeChanged хоста в NiceGUI."""
    client.run_javascript(SUBSCRIBE_THEME_JS)


def build_context(
    state: HostState,
    *,
    bot_token: str,
    max_age_seconds: int,
    allow_dev: bool = False,
    default_scheme: ColorScheme = ColorScheme.LIGHT,
) -> WebAppContext:
    """
    Аутентифицирует initData и собирает контекст WebApp.

    Вне Telegram (пустые initData) при allow_dev подставляются
    тестовые initData, подписанные тем же токеном.
    """
    raw = state.init_data
    if not raw and allow_dev and bot_token:
        logger.warning("Telegram WebApp не обнаружен, используются тестовые initData")
        raw = build_dev_init_data(bot_token)

    init_data = authenticate_init_data(raw, bot_token, max_age_seconds=max_age_seconds) if raw else None

    return WebAppContext(
        init_data=init_data,
        init_data_raw=raw or None,
        theme_params=state.theme_params,
        color_scheme=state.color_scheme or default_scheme,
        platform=detect_platform(state.user_agent),
        is_initialized=True,
    )
