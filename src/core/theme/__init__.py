"""
Домен темы Telegram WebApp.
Разрешение темы, применение к документу, цветовые утилиты.
"""

from src.core.theme.applier import (
    MANAGED_PROPERTIES,
    DocumentRoot,
    InMemoryDocumentRoot,
    ThemeApplier,
    ThemeSession,
    applied_theme,
    css_variables,
    semantic_palette,
)
from src.core.theme.colors import Themed, adapt_color, contrast_color, is_hex_color, resolve_themed_styles
from src.core.theme.models import (
    DARK_THEME_DEFAULTS,
    LIGHT_THEME_DEFAULTS,
    ResolvedTheme,
    SemanticPalette,
    ThemeParams,
)
from src.core.theme.resolver import ThemeResolver, resolve_theme

__all__ = [
    "MANAGED_PROPERTIES",
    "DocumentRoot",
    "InMemoryDocumentRoot",
    "ThemeApplier",
    "ThemeSession",
    "applied_theme",
    "css_variables",
    "semantic_palette",
    "Themed",
    "adapt_color",
    "contrast_color",
    "is_hex_color",
    "resolve_themed_styles",
    "DARK_THEME_DEFAULTS",
    "LIGHT_THEME_DEFAULTS",
    "ResolvedTheme",
    "SemanticPalette",
    "ThemeParams",
    "ThemeResolver",
    "resolve_theme",
]
