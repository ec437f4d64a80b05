# src/services/__init__.py
"""
Сервисы приложения.

- miniapp_bff: FastAPI BFF для Telegram Mini App (initData, тема)
"""

__all__: list[str] = []
