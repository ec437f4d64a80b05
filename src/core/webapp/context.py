# src/core/webapp/context.py
"""
Снимок состояния Telegram WebApp для одной сессии Mini App
и проверка доступа к экрану (минимальная версия, пользователь, инициализация).
"""

from __future__ import annotations

import time
from typing import Optional

from pydantic import BaseModel, ConfigDict

from src.common.constants import ColorScheme
from src.core.init_data.models import InitData, SafeUser, WebAppUser
from src.core.init_data.signature import sign_init_data
from src.core.init_data.validation import get_safe_user_data
from src.core.platform.service import PlatformInfo, is_version_at_least
from src.core.theme.models import ThemeParams

# Тестовый пользователь для запуска вне Telegram
DEV_USER: dict = {
    "id": 123456789,
    "first_name": "Test User",
    "last_name": "Developer",
    "username": "testuser",
    "language_code": "ru",
    "is_premium": False,
}


class WebAppContext(BaseModel):
    """Состояние WebApp: initData, тема, платформа."""

    model_config = ConfigDict(frozen=True)

    init_data: Optional[InitData] = None
    init_data_raw: Optional[str] = None
    theme_params: ThemeParams = ThemeParams()
    color_scheme: ColorScheme = ColorScheme.LIGHT
    platform: PlatformInfo = PlatformInfo()
    is_initialized: bool = False

    @property
    def user(self) -> WebAppUser | None:
        return self.init_data.user if self.init_data else None

    @property
    def safe_user_data(self) -> SafeUser:
        return get_safe_user_data(self.user)

    @property
    def is_dark(self) -> bool:
        return self.color_scheme == ColorScheme.DARK

    def is_version_at_least(self, required: str) -> bool:
        """Поддерживает ли клиент WebApp API версии required."""
        return is_version_at_least(self.platform.version, required)


def passes_gate(
    context: WebAppContext | None,
    *,
    require_user: bool = False,
    require_initialized: bool = True,
    min_version: str | None = None,
) -> bool:
    """Можно ли показывать экран в текущем состоянии WebApp."""
    if context is None:
        return False
    if require_initialized and not context.is_initialized:
        return False
    if require_user and context.user is None:
        return False
    if min_version and not context.is_version_at_least(min_version):
        return False
    return True


def build_dev_init_data(bot_token: str, now: int | None = None) -> str:
    """
    initData тестового пользователя, подписанные токеном бота.
    Проходят authenticate_init_data() — только для DEBUG вне Telegram.
    """
    auth_date = int(time.time()) if now is None else now
    return sign_init_data({"user": DEV_USER, "auth_date": auth_date}, bot_token)
