# src/core/theme/applier.py
"""
Применение темы к корню документа.

ThemeApplier — единственный владелец 15 CSS-переменных темы
(13 --tg-theme-* и алиасы --background/--foreground).
Каждая активация парная: applied_theme() и ThemeSession снимают
переменные на любом пути выхода, включая исключения.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, Mapping, Protocol

from src.common.constants import ColorScheme
from src.common.logger import get_logger
from src.core.theme.models import THEME_ROLES, ResolvedTheme, SemanticPalette, ThemeParams
from src.core.theme.resolver import ThemeResolver

logger = get_logger("theme")


def css_variable_name(role: str) -> str:
    """bg_color -> --tg-theme-bg-color"""
    return "--tg-theme-" + role.replace("_", "-")


BACKGROUND_ALIAS = "--background"
FOREGROUND_ALIAS = "--foreground"

MANAGED_PROPERTIES: tuple[str, ...] = (
    *(css_variable_name(role) for role in THEME_ROLES),
    BACKGROUND_ALIAS,
    FOREGROUND_ALIAS,
)


# =============================================================================
# ПРОЕКЦИИ ТЕМЫ
# =============================================================================

def css_variables(theme: ResolvedTheme) -> dict[str, str]:
    """CSS-переменные: 13 ролей + алиасы фона и текста."""
    variables = {css_variable_name(role): getattr(theme, role) for role in THEME_ROLES}
    variables[BACKGROUND_ALIAS] = theme.bg_color
    variables[FOREGROUND_ALIAS] = theme.text_color
    return variables


def semantic_palette(theme: ResolvedTheme) -> SemanticPalette:
    """Семантическая палитра; часть ролей используется в нескольких слотах."""
    return SemanticPalette(
        background=theme.bg_color,
        foreground=theme.text_color,
        muted=theme.secondary_bg_color,
        muted_foreground=theme.hint_color,
        primary=theme.button_color,
        primary_foreground=theme.button_text_color,
        secondary=theme.secondary_bg_color,
        secondary_foreground=theme.text_color,
        accent=theme.accent_text_color,
        accent_foreground=theme.text_color,
        destructive=theme.destructive_text_color,
        destructive_foreground=theme.button_text_color,
        border=theme.hint_color,
        input=theme.secondary_bg_color,
        ring=theme.accent_text_color,
    )


# =============================================================================
# КОРЕНЬ ДОКУМЕНТА
# =============================================================================

class DocumentRoot(Protocol):
    """Стиль корневого элемента документа (document.documentElement.style)."""

    def set_property(self, name: str, value: str) -> None: ...

    def remove_property(self, name: str) -> None: ...


class InMemoryDocumentRoot:
    """Корень документа в памяти: для headless-режима и тестов."""

    def __init__(self) -> None:
        self.style: dict[str, str] = {}

    def set_property(self, name: str, value: str) -> None:
        self.style[name] = value

    def remove_property(self, name: str) -> None:
        self.style.pop(name, None)

    def get_property(self, name: str) -> str | None:
        return self.style.get(name)


# =============================================================================
# ПРИМЕНЕНИЕ ТЕМЫ
# =============================================================================

class ThemeApplier:
    """
    Записывает тему в корень документа и снимает её.

    Без документа (root=None) activate/deactivate ничего не делают.
    """

    def __init__(self, root: DocumentRoot | None = None) -> None:
        self._root = root
        self._theme: ResolvedTheme | None = None
        self._active = False

    @property
    def theme(self) -> ResolvedTheme | None:
        return self._theme

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def css_variables(self) -> dict[str, str]:
        if self._theme is None:
            return {}
        return css_variables(self._theme)

    @property
    def semantic_palette(self) -> SemanticPalette | None:
        if self._theme is None:
            return None
        return semantic_palette(self._theme)

    def activate(self, theme: ResolvedTheme) -> None:
        """Записывает 15 переменных; повторный вызов перезаписывает значения."""
        self._theme = theme
        if self._root is None:
            return

        for name, value in css_variables(theme).items():
            self._root.set_property(name, value)
        self._active = True

    def deactivate(self) -> None:
        """Удаляет ровно управляемые переменные. Без активации — no-op."""
        if not self._active or self._root is None:
            return

        for name in MANAGED_PROPERTIES:
            self._root.remove_property(name)
        self._active = False


@contextmanager
def applied_theme(
    applier: ThemeApplier,
    theme: ResolvedTheme,
    *,
    initialized: bool = True,
) -> Iterator[ThemeApplier]:
    """
    Тема активна внутри блока with.

    До инициализации темы хостом активация не выполняется,
    деактивация выполняется всегда.
    """
    if initialized:
        applier.activate(theme)
    try:
        yield applier
    finally:
        applier.deactivate()


class ThemeSession:
    """
    Привязка состояния темы хоста к документу на время жизни области.

    update() пересчитывает тему и полностью заменяет применённый набор.
    До mark_initialized() тема только запоминается.

    >>> with ThemeSession(ThemeApplier(InMemoryDocumentRoot())) as session:
    ...     _ = session.update({"bg_color": "#000000"}, ColorScheme.DARK)
    ...     session.mark_initialized()
    """

    def __init__(
        self,
        applier: ThemeApplier,
        *,
        resolver: ThemeResolver | None = None,
        initialized: bool = False,
    ) -> None:
        self.applier = applier
        self._resolver = resolver or ThemeResolver()
        self._initialized = initialized
        self._params: ThemeParams | Mapping[str, Any] | None = None
        self._color_scheme: ColorScheme | str | None = ColorScheme.LIGHT
        self._closed = False

    @property
    def theme(self) -> ResolvedTheme:
        return self._resolver.resolve(self._params, self._color_scheme)

    @property
    def is_dark(self) -> bool:
        return self._color_scheme == ColorScheme.DARK

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def __enter__(self) -> "ThemeSession":
        self._closed = False
        self._apply()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def mark_initialized(self) -> None:
        """Хост сообщил, что тема готова."""
        self._initialized = True
        self._apply()

    def update(
        self,
        params: ThemeParams | Mapping[str, Any] | None,
        color_scheme: ColorScheme | str | None,
    ) -> ResolvedTheme:
        """Новое состояние хоста (событие themeChanged)."""
        self._params = params
        self._color_scheme = color_scheme
        self._apply()
        return self.theme

    def close(self) -> None:
        self.applier.deactivate()
        self._closed = True

    def _apply(self) -> None:
        if self._closed or not self._initialized:
            return
        theme = self.theme
        self.applier.activate(theme)
        logger.debug(f"Тема применена: scheme={self._color_scheme}, bg={theme.bg_color}")
