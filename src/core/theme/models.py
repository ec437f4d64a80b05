"""
Модели темы Telegram WebApp.
https://core.telegram.org/bots/webapps#themeparams
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

# Порядок ролей совпадает с порядком CSS-переменных
THEME_ROLES: tuple[str, ...] = (
    "bg_color",
    "text_color",
    "hint_color",
    "link_color",
    "button_color",
    "button_text_color",
    "secondary_bg_color",
    "header_bg_color",
    "accent_text_color",
    "section_bg_color",
    "section_header_text_color",
    "subtitle_text_color",
    "destructive_text_color",
)


class ThemeParams(BaseModel):
    """Параметры темы от хост-клиента. Любое поле может отсутствовать."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    bg_color: Optional[str] = None
    text_color: Optional[str] = None
    hint_color: Optional[str] = None
    link_color: Optional[str] = None
    button_color: Optional[str] = None
    button_text_color: Optional[str] = None
    secondary_bg_color: Optional[str] = None
    header_bg_color: Optional[str] = None
    accent_text_color: Optional[str] = None
    section_bg_color: Optional[str] = None
    section_header_text_color: Optional[str] = None
    subtitle_text_color: Optional[str] = None
    destructive_text_color: Optional[str] = None


class ResolvedTheme(BaseModel):
    """Полная тема: все 13 ролей заполнены."""

    model_config = ConfigDict(frozen=True, str_min_length=1)

    bg_color: str
    text_color: str
    hint_color: str
    link_color: str
    button_color: str
    button_text_color: str
    secondary_bg_color: str
    header_bg_color: str
    accent_text_color: str
    section_bg_color: str
    section_header_text_color: str
    subtitle_text_color: str
    destructive_text_color: str


class SemanticPalette(BaseModel):
    """Семантическая палитра для UI (роли Tailwind/shadcn)."""

    model_config = ConfigDict(frozen=True)

    background: str
    foreground: str
    muted: str
    muted_foreground: str
    primary: str
    primary_foreground: str
    secondary: str
    secondary_foreground: str
    accent: str
    accent_foreground: str
    destructive: str
    destructive_foreground: str
    border: str
    input: str
    ring: str


LIGHT_THEME_DEFAULTS = ResolvedTheme(
    bg_color="#ffffff",
    text_color="#000000",
    hint_color="#999999",
    link_color="#2481cc",
    button_color="#2481cc",
    button_text_color="#ffffff",
    secondary_bg_color="#f1f1f1",
    header_bg_color="#ffffff",
    accent_text_color="#2481cc",
    section_bg_color="#ffffff",
    section_header_text_color="#2481cc",
    subtitle_text_color="#999999",
    destructive_text_color="#ff3b30",
)

DARK_THEME_DEFAULTS = ResolvedTheme(
    bg_color="#17212b",
    text_color="#ffffff",
    hint_color="#708499",
    link_color="#6ab7ff",
    button_color="#2481cc",
    button_text_color="#ffffff",
    secondary_bg_color="#232e3c",
    header_bg_color="#17212b",
    accent_text_color="#6ab7ff",
    section_bg_color="#17212b",
    section_header_text_color="#6ab7ff",
    subtitle_text_color="#708499",
    destructive_text_color="#ff6b6b",
)
