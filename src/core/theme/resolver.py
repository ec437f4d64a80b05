# src/core/theme/resolver.py
"""
Разрешение темы: параметры хоста поверх светлых/тёмных значений по умолчанию.
"""

from __future__ import annotations

from typing import Any, Mapping

from src.common.constants import ColorScheme
from src.core.theme.models import (
    DARK_THEME_DEFAULTS,
    LIGHT_THEME_DEFAULTS,
    THEME_ROLES,
    ResolvedTheme,
    ThemeParams,
)

HostParams = ThemeParams | Mapping[str, Any] | None


def defaults_for(color_scheme: ColorScheme | str | None) -> ResolvedTheme:
    """Тёмные значения только для dark, для всего остального светлые."""
    if color_scheme == ColorScheme.DARK:
        return DARK_THEME_DEFAULTS
    return LIGHT_THEME_DEFAULTS


def _host_overrides(host_params: HostParams) -> dict[str, str]:
    if host_params is None:
        return {}
    if isinstance(host_params, ThemeParams):
        values: Mapping[str, Any] = host_params.model_dump()
    else:
        values = host_params

    return {
        role: values[role]
        for role in THEME_ROLES
        if isinstance(values.get(role), str) and values[role]
    }


def resolve_theme(host_params: HostParams, color_scheme: ColorScheme | str | None) -> ResolvedTheme:
    """
    Полная тема для текущего состояния хоста.

    Непустое значение хоста побеждает, пробелы заполняются значениями
    по умолчанию для схемы. Результат всегда содержит все 13 ролей.
    """
    defaults = defaults_for(color_scheme)
    overrides = _host_overrides(host_params)
    if not overrides:
        return defaults
    return defaults.model_copy(update=overrides)


class ThemeResolver:
    """
    resolve_theme() с мемоизацией по идентичности входов.

    Новый объект параметров или другая схема всегда дают пересчёт.
    """

    def __init__(self) -> None:
        self._last_params: HostParams = None
        self._last_scheme: ColorScheme | str | None = None
        self._last_theme: ResolvedTheme | None = None

    def resolve(self, host_params: HostParams, color_scheme: ColorScheme | str | None) -> ResolvedTheme:
        if (
            self._last_theme is not None
            and host_params is self._last_params
            and color_scheme is self._last_scheme
        ):
            return self._last_theme

        self._last_params = host_params
        self._last_scheme = color_scheme
        self._last_theme = resolve_theme(host_params, color_scheme)
        return self._last_theme
