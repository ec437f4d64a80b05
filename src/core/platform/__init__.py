"""
Платформа клиента Telegram.
"""

from src.core.platform.service import PlatformInfo, detect_platform, is_version_at_least

__all__ = [
    "PlatformInfo",
    "detect_platform",
    "is_version_at_least",
]
