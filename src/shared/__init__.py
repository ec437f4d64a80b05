# src/shared/__init__.py
"""
Общий код между сервисами (BFF, web client).
"""

__all__: list[str] = []
