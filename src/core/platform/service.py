# src/core/platform/service.py
"""
Определение платформы клиента по User-Agent и сравнение версий WebApp API.
"""

from __future__ import annotations

import re

from pydantic import BaseModel

from src.common.constants import DEFAULT_PLATFORM_VERSION, Platform

TELEGRAM_VERSION_PATTERN = re.compile(r"telegram[/\s](\d+\.\d+)")

# Порядок важен: iPhone UA содержит "mac os x"
_OS_MARKERS: tuple[tuple[tuple[str, ...], Platform], ...] = (
    (("android",), Platform.ANDROID),
    (("iphone", "ipad"), Platform.IOS),
    (("mac",), Platform.MACOS),
    (("windows",), Platform.WINDOWS),
    (("linux",), Platform.LINUX),
)


class PlatformInfo(BaseModel):
    """Платформа и версия клиента."""
    platform: str = Platform.UNKNOWN.value
    version: str = DEFAULT_PLATFORM_VERSION
    is_telegram_desktop: bool = False
    is_telegram_mobile: bool = False


def detect_platform(user_agent: str | None = None) -> PlatformInfo:
    """
    Определяет платформу по строке User-Agent.

    Приоритет: Telegram Desktop, Telegram, затем ОС по подстроке.
    Версия извлекается только для клиентов семейства Telegram.
    """
    ua = (user_agent or "").lower()

    if "telegram" in ua:
        is_desktop = "desktop" in ua
        match = TELEGRAM_VERSION_PATTERN.search(ua)
        return PlatformInfo(
            platform=(Platform.TDESKTOP if is_desktop else Platform.TELEGRAM).value,
            version=match.group(1) if match else DEFAULT_PLATFORM_VERSION,
            is_telegram_desktop=is_desktop,
            is_telegram_mobile=not is_desktop,
        )

    for markers, platform in _OS_MARKERS:
        if any(marker in ua for marker in markers):
            return PlatformInfo(platform=platform.value)

    return PlatformInfo()


def _version_part(parts: list[str], index: int) -> int:
    """Компонент версии; отсутствующий или нечисловой считается нулём."""
    if index >= len(parts):
        return 0
    try:
        return int(parts[index])
    except ValueError:
        return 0


def is_version_at_least(current: str, required: str) -> bool:
    """
    current >= required при покомпонентном сравнении.

    >>> is_version_at_least("6", "6.0.0")
    True
    """
    current_parts = current.split(".")
    required_parts = required.split(".")

    for i in range(max(len(current_parts), len(required_parts))):
        current_part = _version_part(current_parts, i)
        required_part = _version_part(required_parts, i)
        if current_part > required_part:
            return True
        if current_part < required_part:
            return False

    return True
