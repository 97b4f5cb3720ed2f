"""
Базовые схемы для health check.

Содержит схемы данных для проверки состояния приложения.
"""

from pydantic import Field

from app.schemas.base import CommonBaseSchema


class HealthCheckDataSchema(CommonBaseSchema):
    """
    Схема данных для health check.

    Attributes:
        app (str): Статус приложения
        dialogs (str): Статус хранилища диалогов смены URL
        open_dialogs (int | None): Количество открытых диалогов
    """

    app: str = Field(default="ok", description="Статус приложения", examples=["ok"])
    dialogs: str = Field(
        default="ok",
        description="Статус хранилища диалогов",
        examples=["ok", "fail", "unknown"],
    )
    open_dialogs: int | None = Field(None, description="Количество открытых диалогов")
