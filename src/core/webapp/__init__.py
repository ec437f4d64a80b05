"""
Состояние Telegram WebApp.
"""

from src.core.webapp.context import DEV_USER, WebAppContext, build_dev_init_data, passes_gate

__all__ = [
    "DEV_USER",
    "WebAppContext",
    "build_dev_init_data",
    "passes_gate",
]
