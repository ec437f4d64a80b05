"""
Модели данных Telegram Mini App initData.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from src.common.constants import DEFAULT_LANGUAGE_CODE


class WebAppUser(BaseModel):
    """
    Пользователь (или получатель) из initData.

    Ограничения длины и положительность id моделью не проверяются:
    валидность вычисляется через validate_user().
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    # Строка или bool вместо числа делают пользователя невалидным
    id: StrictInt = Field(..., description="Telegram ID пользователя")
    first_name: str = Field("", description="Имя")
    last_name: Optional[str] = Field(None, description="Фамилия")
    username: Optional[str] = Field(None, description="Username в Telegram")
    language_code: Optional[str] = Field(None, description="IETF код языка клиента")
    is_premium: Optional[bool] = Field(None, description="Есть ли Telegram Premium")
    is_bot: Optional[bool] = None
    added_to_attachment_menu: Optional[bool] = None
    allows_write_to_pm: Optional[bool] = None
    photo_url: Optional[str] = None

    @property
    def full_name(self) -> str:
        """Полное имя пользователя."""
        if self.last_name:
            return f"{self.first_name} {self.last_name}"
        return self.first_name


class WebAppChat(BaseModel):
    """Чат, из которого открыт Mini App (group, supergroup, channel)."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    type: str
    title: str
    username: Optional[str] = None
    photo_url: Optional[str] = None


class InitData(BaseModel):
    """
    Распарсенные initData — одна попытка аутентификации.

    Создаётся парсером один раз на строку и не изменяется.
    hash по умолчанию пустой: такая запись заведомо невалидна.
    """

    model_config = ConfigDict(frozen=True)

    auth_date: int = Field(..., description="Unix-время авторизации (секунды)")
    hash: str = Field("", description="Подпись от хост-клиента")
    query_id: Optional[str] = None
    user: Optional[WebAppUser] = None
    receiver: Optional[WebAppUser] = None
    chat: Optional[WebAppChat] = None
    chat_type: Optional[str] = None
    chat_instance: Optional[str] = None
    start_param: Optional[str] = None
    can_send_after: Optional[int] = None


class SafeUser(BaseModel):
    """Нормализованные данные пользователя, безопасные для UI."""

    id: Optional[int] = None
    first_name: str = ""
    last_name: str = ""
    username: str = ""
    language_code: str = DEFAULT_LANGUAGE_CODE
    is_premium: bool = False
