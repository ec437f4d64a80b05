# tests/core/test_theme_applier.py
"""
Тесты для применения темы к документу.
"""

from __future__ import annotations

import pytest

from src.common.constants import ColorScheme
from src.core.theme.applier import (
    MANAGED_PROPERTIES,
    InMemoryDocumentRoot,
    ThemeApplier,
    ThemeSession,
    applied_theme,
    css_variable_name,
    css_variables,
    semantic_palette,
)
from src.core.theme.models import DARK_THEME_DEFAULTS, LIGHT_THEME_DEFAULTS


@pytest.fixture
def root() -> InMemoryDocumentRoot:
    return InMemoryDocumentRoot()


class TestProjections:
    """Тесты для CSS-переменных и палитры."""

    def test_variable_name(self) -> None:
        assert css_variable_name("bg_color") == "--tg-theme-bg-color"
        assert css_variable_name("section_header_text_color") == "--tg-theme-section-header-text-color"

    def test_css_variables(self) -> None:
        variables = css_variables(LIGHT_THEME_DEFAULTS)

        assert len(variables) == 15
        assert set(variables) == set(MANAGED_PROPERTIES)
        assert variables["--tg-theme-bg-color"] == "#ffffff"
        assert variables["--background"] == LIGHT_THEME_DEFAULTS.bg_color
        assert variables["--foreground"] == LIGHT_THEME_DEFAULTS.text_color

    def test_semantic_palette(self) -> None:
        """Проверяет отображение ролей на семантическую палитру."""
        theme = DARK_THEME_DEFAULTS
        palette = semantic_palette(theme)

        assert palette.background == theme.bg_color
        assert palette.foreground == theme.text_color
        assert palette.muted == theme.secondary_bg_color
        assert palette.muted_foreground == theme.hint_color
        assert palette.primary == theme.button_color
        assert palette.primary_foreground == theme.button_text_color
        assert palette.secondary == theme.secondary_bg_color
        assert palette.accent == theme.accent_text_color
        assert palette.destructive == theme.destructive_text_color
        assert palette.destructive_foreground == theme.button_text_color
        assert palette.border == theme.hint_color
        assert palette.input == theme.secondary_bg_color
        assert palette.ring == theme.accent_text_color


class TestThemeApplier:
    """Тесты для ThemeApplier."""

    def test_activate_writes_all_variables(self, root: InMemoryDocumentRoot) -> None:
        applier = ThemeApplier(root)

        applier.activate(LIGHT_THEME_DEFAULTS)

        assert root.style == css_variables(LIGHT_THEME_DEFAULTS)
        assert applier.is_active is True

    def test_reactivate_replaces_values(self, root: InMemoryDocumentRoot) -> None:
        applier = ThemeApplier(root)

        applier.activate(LIGHT_THEME_DEFAULTS)
        applier.activate(DARK_THEME_DEFAULTS)

        assert root.style == css_variables(DARK_THEME_DEFAULTS)

    def test_deactivate_removes_only_managed(self, root: InMemoryDocumentRoot) -> None:
        """Проверяет, что чужие свойства документа не затрагиваются."""
        root.set_property("--app-accent", "red")
        applier = ThemeApplier(root)

        applier.activate(LIGHT_THEME_DEFAULTS)
        applier.deactivate()

        assert root.style == {"--app-accent": "red"}
        assert applier.is_active is False

    def test_deactivate_without_activate(self, root: InMemoryDocumentRoot) -> None:
        root.set_property("--tg-theme-bg-color", "#abcdef")

        ThemeApplier(root).deactivate()

        assert root.get_property("--tg-theme-bg-color") == "#abcdef"

    def test_no_document_is_noop(self) -> None:
        """Проверяет работу без документа."""
        applier = ThemeApplier()

        applier.activate(LIGHT_THEME_DEFAULTS)
        applier.deactivate()

        assert applier.is_active is False
        assert applier.theme is LIGHT_THEME_DEFAULTS
        assert applier.css_variables["--tg-theme-bg-color"] == "#ffffff"

    def test_projections_before_activate(self) -> None:
        applier = ThemeApplier()

        assert applier.theme is None
        assert applier.css_variables == {}
        assert applier.semantic_palette is None


class TestAppliedTheme:
    """Тесты для контекстного менеджера applied_theme."""

    def test_active_inside_block(self, root: InMemoryDocumentRoot) -> None:
        with applied_theme(ThemeApplier(root), DARK_THEME_DEFAULTS):
            assert root.get_property("--tg-theme-bg-color") == DARK_THEME_DEFAULTS.bg_color

        assert root.style == {}

    def test_removed_on_exception(self, root: InMemoryDocumentRoot) -> None:
        """Проверяет снятие темы при исключении внутри блока."""
        with pytest.raises(RuntimeError):
            with applied_theme(ThemeApplier(root), DARK_THEME_DEFAULTS):
                raise RuntimeError("boom")

        assert root.style == {}

    def test_not_initialized(self, root: InMemoryDocumentRoot) -> None:
        with applied_theme(ThemeApplier(root), DARK_THEME_DEFAULTS, initialized=False):
            assert root.style == {}


class TestThemeSession:
    """Тесты для ThemeSession."""

    def test_waits_for_initialization(self, root: InMemoryDocumentRoot) -> None:
        """Проверяет, что до инициализации тема не применяется."""
        with ThemeSession(ThemeApplier(root)) as session:
            session.update({"bg_color": "#101010"}, ColorScheme.DARK)
            assert root.style == {}

            session.mark_initialized()
            assert root.get_property("--tg-theme-bg-color") == "#101010"
            assert root.get_property("--tg-theme-text-color") == DARK_THEME_DEFAULTS.text_color

        assert root.style == {}

    def test_update_replaces_whole_set(self, root: InMemoryDocumentRoot) -> None:
        with ThemeSession(ThemeApplier(root), initialized=True) as session:
            session.update({"bg_color": "#101010"}, ColorScheme.DARK)
            theme = session.update({}, ColorScheme.LIGHT)

            assert theme.model_dump() == LIGHT_THEME_DEFAULTS.model_dump()
            assert root.style == css_variables(LIGHT_THEME_DEFAULTS)
            assert session.is_dark is False

    def test_initialized_session_applies_light_defaults_on_enter(self, root: InMemoryDocumentRoot) -> None:
        with ThemeSession(ThemeApplier(root), initialized=True):
            assert root.style == css_variables(LIGHT_THEME_DEFAULTS)

    def test_no_writes_after_close(self, root: InMemoryDocumentRoot) -> None:
        """Проверяет, что после закрытия обновления не пишутся в документ."""
        session = ThemeSession(ThemeApplier(root), initialized=True)
        with session:
            pass

        session.update({"bg_color": "#202020"}, ColorScheme.DARK)

        assert root.style == {}

    def test_removed_on_exception(self, root: InMemoryDocumentRoot) -> None:
        with pytest.raises(ValueError):
            with ThemeSession(ThemeApplier(root), initialized=True):
                raise ValueError("boom")

        assert root.style == {}

    def test_is_dark(self) -> None:
        session = ThemeSession(ThemeApplier())

        session.update(None, ColorScheme.DARK)

        assert session.is_dark is True
        assert session.theme.model_dump() == DARK_THEME_DEFAULTS.model_dump()
