"""
Обработчики исключений FastAPI.

Любая ошибка превращается в единый конверт ответа:

    {"success": false, "message": null, "data": null, "error": {...}}

Ошибки формата slug сюда не попадают: они возвращаются как данные
с кодом 200.
"""

import logging
import uuid
from datetime import datetime
from typing import Any

import pytz
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException
from starlette.status import (
    HTTP_422_UNPROCESSABLE_CONTENT,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from .base import BaseAPIException

logger = logging.getLogger(__name__)

moscow_tz = pytz.timezone("Europe/Moscow")


def create_error_response(
    status_code: int,
    detail: str,
    error_type: str,
    request_id: str | None = None,
    timestamp: str | None = None,
    extra: dict[str, Any] | None = None,
) -> JSONResponse:
    """
    Собирает JSON-ответ с ошибкой.

    Args:
        status_code: HTTP код
        detail: Описание ошибки
        error_type: Тип ошибки для клиента
        request_id: Идентификатор (новый, если не передан)
        timestamp: Время ошибки (текущее, если не передано)
        extra: Дополнительные данные

    Returns:
        JSONResponse: Ответ в формате ErrorResponseSchema
    """
    error = {
        "detail": detail,
        "error_type": error_type,
        "status_code": status_code,
        "timestamp": timestamp or datetime.now(moscow_tz).isoformat(),
        "request_id": request_id or str(uuid.uuid4()),
        "extra": extra or None,
    }

    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder({"success": False, "message": None, "data": None, "error": error}),
    )


def _request_context(request: Request) -> dict[str, Any]:
    """Поля запроса для extra в логах (метод, путь и dialog_id, если он есть в пути)."""
    context = {"request_method": request.method, "request_path": request.url.path}
    if "dialog_id" in request.path_params:
        context["dialog_id"] = request.path_params["dialog_id"]
    return context


async def api_exception_handler(request: Request, exc: BaseAPIException):
    """Доменные исключения: код и тип берутся из самого исключения."""
    logger.warning(
        "%s %s: %s (%s)",
        request.method,
        request.url.path,
        exc.detail,
        exc.error_type,
        extra={**_request_context(request), "request_id": exc.request_id},
    )

    return create_error_response(
        status_code=exc.status_code,
        detail=exc.detail,
        error_type=exc.error_type,
        request_id=exc.request_id,
        timestamp=exc.timestamp,
        extra=exc.extra,
    )


async def http_exception_handler(request: Request, exc: HTTPException):
    """Стандартные HTTP-исключения Starlette (например, 404 на неизвестный путь, 405)."""
    logger.warning(
        "%s %s: HTTP %d %s",
        request.method,
        request.url.path,
        exc.status_code,
        exc.detail,
        extra=_request_context(request),
    )

    return create_error_response(
        status_code=exc.status_code,
        detail=str(exc.detail),
        error_type="http_error",
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Ошибки валидации тела и параметров запроса (422).

    В extra.errors попадает список {"loc", "msg"} без исходных значений,
    чтобы не дублировать ввод пользователя в ответе и логах.
    """
    errors = [{"loc": list(err["loc"]), "msg": err["msg"]} for err in exc.errors()]

    logger.warning(
        "%s %s: некорректный запрос (%d ошибок)",
        request.method,
        request.url.path,
        len(errors),
        extra={**_request_context(request), "validation_errors": errors},
    )

    return create_error_response(
        status_code=HTTP_422_UNPROCESSABLE_CONTENT,
        detail="Некорректные данные запроса",
        error_type="validation_error",
        extra={"errors": errors},
    )


async def internal_exception_handler(request: Request, exc: Exception):
    """Непредвиденные ошибки (500). Текст исключения наружу не отдаётся."""
    request_id = str(uuid.uuid4())

    logger.error(
        "%s %s: необработанное исключение %s",
        request.method,
        request.url.path,
        type(exc).__name__,
        exc_info=exc,
        extra={**_request_context(request), "request_id": request_id},
    )

    return create_error_response(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Внутренняя ошибка сервера",
        error_type="internal_error",
        request_id=request_id,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Регистрирует обработчики на приложении."""
    app.add_exception_handler(BaseAPIException, api_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, internal_exception_handler)
