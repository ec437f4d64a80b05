# tests/core/test_platform.py
"""
Тесты для определения платформы и сравнения версий.
"""

from __future__ import annotations

import pytest

from src.core.platform.service import detect_platform, is_version_at_least


class TestDetectPlatform:
    """Тесты для detect_platform."""

    def test_telegram_desktop(self) -> None:
        info = detect_platform("Mozilla/5.0 TelegramDesktop Telegram/4.9 (Windows)")

        assert info.platform == "tdesktop"
        assert info.version == "4.9"
        assert info.is_telegram_desktop is True
        assert info.is_telegram_mobile is False

    def test_telegram_mobile(self) -> None:
        info = detect_platform("Mozilla/5.0 (Linux; Android 13) Telegram-Android/10.2 Telegram/10.2")

        assert info.platform == "telegram"
        assert info.version == "10.2"
        assert info.is_telegram_mobile is True
        assert info.is_telegram_desktop is False

    def test_telegram_without_version(self) -> None:
        info = detect_platform("SomeTelegramClient")

        assert info.platform == "telegram"
        assert info.version == "0.0"

    @pytest.mark.parametrize(
        ("user_agent", "expected"),
        [
            ("Mozilla/5.0 (Linux; Android 14; Pixel 8)", "android"),
            ("Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X)", "ios"),
            ("Mozilla/5.0 (iPad; CPU OS 16_0 like Mac OS X)", "ios"),
            ("Mozilla/5.0 (Macintosh; Intel Mac OS X 14_0)", "macos"),
            ("Mozilla/5.0 (Windows NT 10.0; Win64; x64)", "windows"),
            ("Mozilla/5.0 (X11; Linux x86_64)", "linux"),
        ],
    )
    def test_operating_systems(self, user_agent: str, expected: str) -> None:
        """Проверяет определение ОС вне Telegram."""
        info = detect_platform(user_agent)

        assert info.platform == expected
        assert info.version == "0.0"
        assert info.is_telegram_desktop is False
        assert info.is_telegram_mobile is False

    @pytest.mark.parametrize("user_agent", [None, "", "curl/8.0"])
    def test_unknown(self, user_agent) -> None:
        info = detect_platform(user_agent)

        assert info.platform == "unknown"
        assert info.version == "0.0"


class TestIsVersionAtLeast:
    """Тесты для is_version_at_least."""

    @pytest.mark.parametrize(
        ("current", "required", "expected"),
        [
            ("6.1", "6.0", True),
            ("6.0", "6.0", True),
            ("5.9", "6.0", False),
            ("10.0", "9.9", True),
            ("6", "6.0.0", True),
            ("6.0.1", "6.0", True),
            ("6.0", "6.0.1", False),
            ("7.x", "7.0", True),
        ],
    )
    def test_compare(self, current: str, required: str, expected: bool) -> None:
        assert is_version_at_least(current, required) is expected

    def test_reflexive(self) -> None:
        for version in ("0.0", "6.9", "7.10.2"):
            assert is_version_at_least(version, version) is True
