"""
Базовый класс для обработки исключений app.

Включает в себя:
- Логирование ошибок.
- Генерацию уникального идентификатора запроса для ошибки.
- Временную метку в формате ISO 8601 с учетом часового пояса.
"""

import logging
import uuid
from datetime import datetime
from typing import Any

import pytz
from fastapi import HTTPException

logger = logging.getLogger(__name__)
moscow_tz = pytz.timezone("Europe/Moscow")


class BaseAPIException(HTTPException):
    """
    Базовый класс для обработки исключений app.

    Attributes:
        status_code: Код статуса HTTP.
        detail: Сообщение об ошибке.
        error_type: Тип ошибки.
        extra: Дополнительные данные для контекста.
        request_id: Идентификатор ошибки, попадает в ответ и в лог.
        timestamp: Время возникновения ошибки (Europe/Moscow).
    """

    def __init__(
        self,
        status_code: int,
        detail: str,
        error_type: str,
        extra: dict[Any, Any] | None = None,
    ) -> None:
        self.error_type = error_type
        self.extra = extra or {}
        self.request_id = str(uuid.uuid4())
        self.timestamp = datetime.now(moscow_tz).isoformat()

        context = {
            "timestamp": self.timestamp,
            "request_id": self.request_id,
            "status_code": status_code,
            "error_type": error_type,
            **self.extra,
        }

        logger.error(detail, extra=context)
        super().__init__(status_code=status_code, detail=detail)
