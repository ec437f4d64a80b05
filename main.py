#!/usr/bin/env python3
# main.py
"""
Главная точка входа Telegram Mini App.
Запускает MiniApp BFF, Web Client или проверку initData в зависимости от аргументов.
"""

from __future__ import annotations

import json
import sys

from src.config import settings
from src.common.logger import setup_logging
from src.core.init_data.parser import parse_init_data
from src.core.init_data.signature import verify_signature
from src.core.init_data.validation import create_safe_logging_view, validate_basic, validate_user


def run_miniapp_bff() -> None:
    """Запускает FastAPI BFF через uvicorn."""
    import uvicorn

    uvicorn.run(
        "src.services.miniapp_bff.app:app",
        host="0.0.0.0",
        port=settings.deployment.MINIAPP_BFF_PORT,
        reload=settings.system.DEBUG,
        log_level=settings.system.LOG_LEVEL.lower(),
    )


def run_web_client() -> None:
    """Запускает NiceGUI клиент."""
    from src.web_client.app import run_web_client as run

    run(host=settings.telegram.WEBAPP_HOST, port=settings.deployment.WEB_CLIENT_PORT)


def check_init_data(raw: str) -> int:
    """
    Диагностика строки initData без вывода персональных данных.

    Returns:
        Код возврата: 0 — данные валидны, 1 — нет
    """
    init_data = parse_init_data(raw)
    report = {
        "parsed": init_data is not None,
        "basic_valid": validate_basic(init_data),
        "user_valid": validate_user(init_data.user) if init_data else False,
        "signature_valid": verify_signature(raw, settings.telegram.BOT_TOKEN),
        "session": create_safe_logging_view(init_data),
    }
    print(json.dumps(report, ensure_ascii=False, indent=2))

    ok = report["basic_valid"] and report["user_valid"] and report["signature_valid"]
    return 0 if ok else 1


def print_usage() -> None:
    """Выводит справку по использованию."""
    print("""
Telegram Mini App — initData и тема

Использование:
    python main.py [mode]

Режимы:
    miniapp_bff            — MiniApp BFF (:8088)
    web_client             — Web Client UI (:8082)
    check_init_data RAW    — проверить строку initData (или из stdin)

Примеры:
    python main.py miniapp_bff
    echo "$INIT_DATA" | python main.py check_init_data
    """)


def main(argv: list[str]) -> int:
    if len(argv) < 2 or argv[1].lower() in ("--help", "-h"):
        print_usage()
        return 0

    setup_logging()
    mode = argv[1].lower()

    if mode == "miniapp_bff":
        run_miniapp_bff()
        return 0
    if mode == "web_client":
        run_web_client()
        return 0
    if mode == "check_init_data":
        raw = argv[2] if len(argv) > 2 else sys.stdin.read().strip()
        return check_init_data(raw)

    print(f"Ошибка: неизвестный режим '{mode}'")
    print_usage()
    return 1


if __name__ == "__main__":
    sys.exit(main(sys.argv))
