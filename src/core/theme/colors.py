# src/core/theme/colors.py
"""
Цветовые утилиты: контраст, выбор цвета и стилей по схеме.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Generic, Mapping, TypeVar

T = TypeVar("T")

HEX_COLOR_PATTERN = re.compile(r"^#?[0-9a-fA-F]{6}$")

BLACK = "#000000"
WHITE = "#ffffff"


def is_hex_color(value: str) -> bool:
    """Шесть hex-цифр, # в начале необязателен."""
    return bool(HEX_COLOR_PATTERN.match(value))


def contrast_color(hex_color: str) -> str:
    """
    Цвет текста, читаемый на фоне hex_color.

    Яркость 0.299R + 0.587G + 0.114B; больше 128 -> чёрный, иначе белый.

    Raises:
        ValueError: если hex_color не из шести hex-цифр
    """
    if not is_hex_color(hex_color):
        raise ValueError(f"Ожидался цвет вида #rrggbb, получено: {hex_color!r}")

    value = hex_color.lstrip("#")
    r, g, b = (int(value[i:i + 2], 16) for i in (0, 2, 4))
    brightness = 0.299 * r + 0.587 * g + 0.114 * b
    return BLACK if brightness > 128 else WHITE


def adapt_color(light_color: str, dark_color: str | None = None, *, is_dark: bool) -> str:
    """Тёмный вариант в тёмной схеме, если задан; иначе светлый."""
    if is_dark and dark_color:
        return dark_color
    return light_color


@dataclass(frozen=True)
class Themed(Generic[T]):
    """Значение стиля с вариантами для светлой и тёмной схем."""
    light: T
    dark: T

    def pick(self, is_dark: bool) -> T:
        return self.dark if is_dark else self.light


def resolve_themed_styles(styles: Mapping[str, Any], is_dark: bool) -> dict[str, Any]:
    """Themed-значения заменяются вариантом схемы, остальные не меняются."""
    return {
        key: value.pick(is_dark) if isinstance(value, Themed) else value
        for key, value in styles.items()
    }
