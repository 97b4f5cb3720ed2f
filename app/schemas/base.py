"""
Базовые схемы API.

- CommonBaseSchema: общая конфигурация моделей
- BaseRequestSchema: основа схем запросов
- BaseResponseSchema: конверт ответа {success, message, data}
- ErrorSchema / ErrorResponseSchema: формат ошибок из handlers.py
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class CommonBaseSchema(BaseModel):
    """
    Общая базовая схема для всех моделей.

    Attributes:
        model_config (ConfigDict): Конфигурация модели, позволяющая
        использовать атрибуты в качестве полей.
    """

    model_config = ConfigDict(from_attributes=True)


class BaseRequestSchema(CommonBaseSchema):
    """
    Базовая схема для входных данных.
    Этот класс наследуется от `CommonBaseSchema`
    и предоставляет общую конфигурацию для всех схем входных данных.

    Запросы не содержат служебных полей (id, даты).
    """


class BaseResponseSchema(CommonBaseSchema):
    """
    Базовая схема для ответов API.

    Этот класс наследуется от `CommonBaseSchema` и предоставляет общую
    конфигурацию для всех схем ответов, включая возможность добавления
    метаданных и сообщений об ошибках.

    Attributes:
        success (bool): Указывает, успешен ли запрос.
        message (Optional[str]): Сообщение, связанное с ответом.
    """

    success: bool = True
    message: str | None = None


class ErrorSchema(CommonBaseSchema):
    """
    Схема для представления данных об ошибке.

    Attributes:
        detail: Подробное описание ошибки
        error_type: Тип ошибки для идентификации на клиенте
        status_code: HTTP код ответа
        timestamp: Временная метка возникновения ошибки
        request_id: Уникальный идентификатор запроса
        extra: Дополнительные данные об ошибке
    """

    detail: str
    error_type: str
    status_code: int
    timestamp: str
    request_id: str
    extra: dict[str, Any] | None = None


class ErrorResponseSchema(BaseResponseSchema):
    """
    Модель для представления API ошибок в документации.

    Соответствует формату исключений, обрабатываемых в handlers.py.
    Обеспечивает единый формат ответов с ошибками во всем API.

    Attributes:
        success: Всегда False для ошибок
        message: Информационное сообщение, обычно None для ошибок
        data: Всегда None для ошибок
        error: Детальная информация об ошибке
    """

    success: bool = False
    message: str | None = None
    data: None = None
    error: ErrorSchema


