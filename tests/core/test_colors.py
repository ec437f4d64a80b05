# tests/core/test_colors.py
"""
Тесты для цветовых утилит.
"""

from __future__ import annotations

import pytest

from src.core.theme.colors import (
    BLACK,
    WHITE,
    Themed,
    adapt_color,
    contrast_color,
    is_hex_color,
    resolve_themed_styles,
)


class TestContrastColor:
    """Тесты для contrast_color."""

    @pytest.mark.parametrize(
        ("background", "expected"),
        [
            ("#ffffff", BLACK),
            ("#000000", WHITE),
            ("#17212b", WHITE),
            ("#f1f1f1", BLACK),
            ("ffff00", BLACK),
            ("#2481cc", WHITE),
        ],
    )
    def test_contrast(self, background: str, expected: str) -> None:
        assert contrast_color(background) == expected

    def test_near_threshold(self) -> None:
        """Проверяет цвета по обе стороны порога яркости 128."""
        assert contrast_color("#7f7f7f") == WHITE
        assert contrast_color("#818181") == BLACK

    @pytest.mark.parametrize("value", ["", "#fff", "#gggggg", "red", "#1234567"])
    def test_malformed(self, value: str) -> None:
        with pytest.raises(ValueError):
            contrast_color(value)


class TestIsHexColor:

    def test_valid(self) -> None:
        assert is_hex_color("#AbCdEf") is True
        assert is_hex_color("abcdef") is True

    def test_invalid(self) -> None:
        assert is_hex_color("#abc") is False


class TestAdaptColor:
    """Тесты для adapt_color."""

    def test_dark_variant(self) -> None:
        assert adapt_color("#ffffff", "#000000", is_dark=True) == "#000000"

    def test_light_scheme(self) -> None:
        assert adapt_color("#ffffff", "#000000", is_dark=False) == "#ffffff"

    def test_dark_without_variant(self) -> None:
        """Проверяет, что без тёмного варианта возвращается светлый."""
        assert adapt_color("#ffffff", is_dark=True) == "#ffffff"
        assert adapt_color("#ffffff", "", is_dark=True) == "#ffffff"


class TestThemedStyles:
    """Тесты для resolve_themed_styles."""

    def test_pick(self) -> None:
        themed = Themed(light="#fff", dark="#000")

        assert themed.pick(True) == "#000"
        assert themed.pick(False) == "#fff"

    def test_resolve(self) -> None:
        styles = {
            "color": Themed(light="black", dark="white"),
            "padding": "8px",
            "opacity": 1,
        }

        assert resolve_themed_styles(styles, is_dark=True) == {
            "color": "white",
            "padding": "8px",
            "opacity": 1,
        }
        assert resolve_themed_styles(styles, is_dark=False)["color"] == "black"

    def test_plain_dict_with_light_key_untouched(self) -> None:
        """Проверяет, что обычный словарь с ключами light/dark не подменяется."""
        value = {"light": "a", "dark": "b"}

        assert resolve_themed_styles({"x": value}, is_dark=True) == {"x": value}
