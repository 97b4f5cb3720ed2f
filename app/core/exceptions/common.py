"""
Общие исключения для API.

Содержит базовые исключения, которые могут использоваться в различных частях приложения.
"""

from typing import Any

from starlette.status import (
    HTTP_404_NOT_FOUND,
    HTTP_409_CONFLICT,
)

from .base import BaseAPIException


class NotFoundError(BaseAPIException):
    """
    Исключение для случая, когда запрашиваемый ресурс не найден.

    Attributes:
        status_code (int): HTTP_404_NOT_FOUND.
        detail (str): Подробное сообщение об ошибке.
        error_type (str): Тип ошибки "not_found".
    """

    def __init__(
        self,
        detail: str = "Ресурс не найден",
        field: str | None = None,
        value: Any | None = None,
        error_type: str = "not_found",
        extra: dict[Any, Any] | None = None,
    ):
        """
        Инициализация исключения NotFoundError.

        Args:
            detail (str): Сообщение об ошибке.
            field (str, optional): Название поля, по которому искали.
            value (Any, optional): Значение, которое не было найдено.
            error_type (str): Тип ошибки для клиента.
            extra (Dict, optional): Дополнительные данные.
        """
        if extra is None:
            extra = {}

        if field and value:
            extra.update({"field": field, "value": value})

        super().__init__(
            status_code=HTTP_404_NOT_FOUND,
            detail=detail,
            error_type=error_type,
            extra=extra,
        )


class ConflictError(BaseAPIException):
    """
    Исключение для конфликтов данных (например, дублирование уникальных полей).

    Attributes:
        status_code (int): HTTP_409_CONFLICT.
        detail (str): Подробное сообщение об ошибке.
        error_type (str): Тип ошибки "conflict".
    """

    def __init__(
        self,
        detail: str = "Конфликт данных",
        error_type: str = "conflict",
        extra: dict[Any, Any] | None = None,
    ):
        super().__init__(
            status_code=HTTP_409_CONFLICT,
            detail=detail,
            error_type=error_type,
            extra=extra,
        )

