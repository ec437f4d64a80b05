# src/core/__init__.py
"""
Доменный слой (Core Domain).
Чистая логика Mini App, независимая от FastAPI и NiceGUI.
"""

from src.core.init_data import InitData, WebAppUser, parse_init_data, authenticate_init_data
from src.core.platform import PlatformInfo, detect_platform
from src.core.theme import ResolvedTheme, ThemeApplier, ThemeSession, resolve_theme

__all__ = [
    "InitData",
    "WebAppUser",
    "parse_init_data",
    "authenticate_init_data",
    "PlatformInfo",
    "detect_platform",
    "ResolvedTheme",
    "ThemeApplier",
    "ThemeSession",
    "resolve_theme",
]
