"""
Схемы ответов для health check endpoints.
"""

from pydantic import Field

from app.schemas.base import BaseResponseSchema

from .base import HealthCheckDataSchema


class HealthCheckResponseSchema(BaseResponseSchema):
    """
    Схема ответа для health check endpoint.

    Attributes:
        success (bool): Успешность проверки
        message (str): Сообщение о статусе
        data (HealthCheckDataSchema): Статусы компонентов
    """

    data: HealthCheckDataSchema = Field(..., description="Статусы проверяемых компонентов")
