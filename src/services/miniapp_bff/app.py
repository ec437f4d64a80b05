# src/services/miniapp_bff/app.py
"""
FastAPI приложение для MiniApp BFF.

Backend for Frontend для Telegram Mini App.
Все endpoints /api/v1/miniapp/* требуют заголовок X-Telegram-Init-Data
с подписанными initData.

Endpoints:
- GET /health - проверка здоровья
- GET /api/v1/miniapp/me - пользователь, платформа, сессия (без PII)
- POST /api/v1/miniapp/theme - разрешённая тема, CSS-переменные, палитра
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Annotated, Any, Optional

from fastapi import Depends, FastAPI, Header, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, field_validator

from src.common.constants import ColorScheme
from src.common.logger import log_info, log_warning, setup_logging
from src.core.init_data.models import InitData, SafeUser
from src.core.init_data.validation import create_safe_logging_view, get_safe_user_data
from src.core.platform.service import PlatformInfo, detect_platform
from src.core.theme.applier import css_variables, semantic_palette
from src.core.theme.models import ResolvedTheme, SemanticPalette, ThemeParams
from src.core.theme.resolver import ThemeResolver
from src.services.miniapp_bff.dependencies import (
    cleanup_dependencies,
    get_bot_token,
    get_max_age_seconds,
    get_theme_resolver,
    init_dependencies,
)
from src.services.miniapp_bff.telegram_auth import TelegramAuthError, validate_init_data
from src.shared.models.common import HealthStatus

SERVICE_VERSION = "1.0.0"


# === REQUEST / RESPONSE MODELS ===

class MeResponse(BaseModel):
    """Текущий пользователь Mini App."""
    user: SafeUser
    platform: PlatformInfo
    session: dict[str, Any]


class ThemeRequest(BaseModel):
    """Состояние темы хоста."""
    theme_params: ThemeParams = ThemeParams()
    color_scheme: ColorScheme = ColorScheme.LIGHT

    @field_validator("color_scheme", mode="before")
    @classmethod
    def unknown_scheme_is_light(cls, v: Any) -> Any:
        """Неизвестная схема разрешается как светлая."""
        if v not in (ColorScheme.LIGHT.value, ColorScheme.DARK.value):
            return ColorScheme.LIGHT
        return v


class ThemeResponse(BaseModel):
    """Разрешённая тема и её проекции."""
    color_scheme: ColorScheme
    theme: ResolvedTheme
    css_variables: dict[str, str]
    palette: SemanticPalette


# === AUTH DEPENDENCY ===

async def get_current_user(
    x_telegram_init_data: Annotated[str, Header(alias="X-Telegram-Init-Data")],
) -> InitData:
    """
    Валидировать initData из заголовка X-Telegram-Init-Data.

    Проверяется подпись, свежесть и форма пользователя.
    """
    try:
        return validate_init_data(
            x_telegram_init_data,
            get_bot_token(),
            get_max_age_seconds(),
        )
    except TelegramAuthError as e:
        await log_warning(f"Отказ в аутентификации Mini App: {e}", logger_name="miniapp_bff")
        raise HTTPException(status_code=401, detail=str(e))


# === LIFESPAN ===

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Жизненный цикл приложения."""
    from src.config import settings

    setup_logging()
    init_dependencies(
        bot_token=settings.telegram.BOT_TOKEN,
        max_age_seconds=settings.telegram.INIT_DATA_MAX_AGE_SECONDS,
    )
    await log_info("MiniApp BFF запущен", logger_name="miniapp_bff")

    yield

    cleanup_dependencies()
    await log_info("MiniApp BFF остановлен", logger_name="miniapp_bff")


# === APP ===

app = FastAPI(
    title="MiniApp BFF",
    description="Backend for Frontend для Telegram Mini App: initData и тема.",
    version=SERVICE_VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Mini App загружается с разных доменов Telegram
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# === HEALTH CHECK ===

@app.get("/health", response_model=HealthStatus, tags=["Health"])
async def health_check() -> HealthStatus:
    """Проверка здоровья сервиса."""
    return HealthStatus(
        status="healthy",
        service="miniapp_bff",
        version=SERVICE_VERSION,
    )


# === USER ===

@app.get("/api/v1/miniapp/me", response_model=MeResponse, tags=["User"])
async def get_me(
    init_data: Annotated[InitData, Depends(get_current_user)],
    user_agent: Annotated[Optional[str], Header()] = None,
) -> MeResponse:
    """
    Данные текущего пользователя.

    Возвращает:
    - нормализованного пользователя
    - платформу клиента по User-Agent
    - представление сессии без персональных данных
    """
    session = create_safe_logging_view(init_data)
    await log_info("Запрос профиля Mini App", logger_name="miniapp_bff", extra={"session": session})

    return MeResponse(
        user=get_safe_user_data(init_data.user),
        platform=detect_platform(user_agent),
        session=session or {},
    )


# === THEME ===

@app.post("/api/v1/miniapp/theme", response_model=ThemeResponse, tags=["Theme"])
async def resolve_theme_endpoint(
    request: ThemeRequest,
    init_data: Annotated[InitData, Depends(get_current_user)],
    resolver: Annotated[ThemeResolver, Depends(get_theme_resolver)],
) -> ThemeResponse:
    """Разрешить тему хоста поверх значений по умолчанию для схемы."""
    theme = resolver.resolve(request.theme_params, request.color_scheme)
    return ThemeResponse(
        color_scheme=request.color_scheme,
        theme=theme,
        css_variables=css_variables(theme),
        palette=semantic_palette(theme),
    )
