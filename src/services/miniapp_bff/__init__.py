# src/services/miniapp_bff/__init__.py
"""
MiniApp BFF — Backend for Frontend для Telegram Mini App.

- Проверка подписи и свежести initData
- Нормализованные данные пользователя
- Разрешение темы хоста для серверного рендеринга
"""
