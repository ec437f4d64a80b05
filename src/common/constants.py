"""
Общие константы и перечисления.
"""

from enum import Enum


class TypeMsg(str, Enum):
    """Типы сообщений для логирования."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ColorScheme(str, Enum):
    """Цветовая схема хост-клиента Telegram."""
    LIGHT = "light"
    DARK = "dark"


class Platform(str, Enum):
    """Платформы, определяемые по User-Agent."""
    TDESKTOP = "tdesktop"
    TELEGRAM = "telegram"
    ANDROID = "android"
    IOS = "ios"
    MACOS = "macos"
    WINDOWS = "windows"
    LINUX = "linux"
    UNKNOWN = "unknown"


# Максимальный возраст initData (24 часа)
INIT_DATA_MAX_AGE_SECONDS = 86400

# Ограничения длины полей пользователя Telegram
MAX_FIRST_NAME_LENGTH = 64
MAX_LAST_NAME_LENGTH = 64
MAX_USERNAME_LENGTH = 32

DEFAULT_LANGUAGE_CODE = "en"
DEFAULT_PLATFORM_VERSION = "0.0"
