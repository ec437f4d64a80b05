# src/web_client/app.py
"""
NiceGUI клиент Mini App.

Страница аутентифицирует пользователя по initData и держит тему
Telegram применённой к документу, пока клиент подключён.
"""

import os
from contextlib import ExitStack

# Локальные данные NiceGUI не нужны в корне проекта
os.environ.setdefault("NICEGUI_STORAGE_PATH", "/tmp/tg_event_miniapp_nicegui")

from nicegui import Client, app, ui
from nicegui.events import GenericEventArguments

from src.common.logger import log_info, log_warning
from src.config import settings
from src.core.init_data.validation import create_safe_logging_view
from src.core.theme.applier import ThemeApplier, ThemeSession
from src.core.webapp.context import WebAppContext, passes_gate
from src.web_client.bridge import (
    THEME_CHANGED_EVENT,
    NiceGuiDocumentRoot,
    build_context,
    parse_host_state,
    read_host_state,
    subscribe_theme_changes,
)

# Минимальная версия WebApp API для событий темы
MIN_WEBAPP_VERSION = "6.0"


def render_main(context: WebAppContext) -> None:
    """Главный экран: приветствие и информация о клиенте."""
    user = context.safe_user_data

    with ui.column().classes("w-full p-4 gap-2").style(
        "background-color: var(--tg-theme-bg-color); color: var(--tg-theme-text-color)"
    ):
        if user.id is None:
            ui.label("Откройте приложение из Telegram").classes("text-lg")
            return

        ui.label(f"Привет, {user.first_name}!").classes("text-xl font-bold")
        ui.label(f"Платформа: {context.platform.platform} {context.platform.version}").style(
            "color: var(--tg-theme-hint-color)"
        )
        if not passes_gate(context, require_user=True, min_version=MIN_WEBAPP_VERSION):
            ui.label("Обновите Telegram для полной поддержки темы").style(
                "color: var(--tg-theme-destructive-text-color)"
            )


def create_app() -> None:

    @ui.page("/")
    async def index(client: Client):
        await client.connected()

        state = await read_host_state(client)
        context = build_context(
            state,
            bot_token=settings.telegram.BOT_TOKEN,
            max_age_seconds=settings.telegram.INIT_DATA_MAX_AGE_SECONDS,
            allow_dev=settings.system.DEBUG and settings.telegram.ALLOW_DEV_INIT_DATA,
            default_scheme=settings.theme.DEFAULT_COLOR_SCHEME,
        )
        if context.init_data is None:
            await log_warning("initData не прошли аутентификацию", logger_name="web_client")
        else:
            await log_info(
                "Клиент Mini App подключён",
                logger_name="web_client",
                extra={"session": create_safe_logging_view(context.init_data)},
            )

        # Тема снимается с документа при отключении клиента
        stack = ExitStack()
        session = stack.enter_context(ThemeSession(ThemeApplier(NiceGuiDocumentRoot(client))))
        client.on_disconnect(stack.close)

        session.update(context.theme_params, context.color_scheme)
        session.mark_initialized()

        def on_theme_changed(event: GenericEventArguments) -> None:
            new_state = parse_host_state(event.args)
            session.update(new_state.theme_params, new_state.color_scheme or context.color_scheme)

        ui.on(THEME_CHANGED_EVENT, on_theme_changed)
        subscribe_theme_changes(client)

        render_main(context)

    @app.on_startup
    async def startup() -> None:
        await log_info("Web Client запущен", logger_name="web_client")


def run_web_client(host: str = "0.0.0.0", port: int = 8082, reload: bool = False) -> None:
    create_app()
    ui.run(
        host=host,
        port=port,
        reload=reload,
        title=settings.system.PROJECT_NAME,
    )
