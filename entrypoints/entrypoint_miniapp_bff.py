#!/usr/bin/env python3
"""
Entrypoint для MiniApp BFF в Docker контейнере.

Запуск:
    python entrypoints/entrypoint_miniapp_bff.py

Порт по умолчанию: 8088
"""

import sys
from pathlib import Path

# Добавляем корневую директорию проекта в путь
project_root = Path(__file__).parent.parent.resolve()
sys.path.insert(0, str(project_root))

from main import run_miniapp_bff


if __name__ == "__main__":
    run_miniapp_bff()
