#!/usr/bin/env python3
# entrypoint_web_client.py
"""
Точка входа для запуска Web Client (NiceGUI) в Docker контейнере.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Добавляем корневую директорию проекта в путь
project_root = Path(__file__).parent.parent.resolve()
sys.path.insert(0, str(project_root))

from src.config import settings
from src.common.logger import setup_logging
from src.web_client.app import run_web_client

if __name__ in {"__main__", "__mp_main__"}:
    # NiceGUI перезапускает модуль как __mp_main__ при reload
    setup_logging()
    run_web_client(
        host=settings.telegram.WEBAPP_HOST,
        port=settings.deployment.WEB_CLIENT_PORT,
    )
