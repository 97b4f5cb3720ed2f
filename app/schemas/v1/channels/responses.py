"""Схемы ответов для URL (slug) канала."""

from pydantic import Field

from app.schemas.base import BaseResponseSchema, CommonBaseSchema

from .base import (
    ChangeURLDialogSchema,
    NormalizedSlugSchema,
    ShortenedURLSchema,
    SlugValidationResult,
)


class NormalizedSlugResponseSchema(BaseResponseSchema):
    """Ответ с нормализованным значением поля."""

    data: NormalizedSlugSchema


class SlugValidationResponseSchema(BaseResponseSchema):
    """Ответ с результатом проверки slug."""

    data: SlugValidationResult


class ShortenedURLResponseSchema(BaseResponseSchema):
    """Ответ с сокращённым URL."""

    data: ShortenedURLSchema


class ChangeURLDialogResponseSchema(BaseResponseSchema):
    """Ответ с состоянием диалога."""

    data: ChangeURLDialogSchema


class ChangeURLSubmitSchema(CommonBaseSchema):
    """
    Итог отправки диалога.

    Attributes:
        result: Результат проверки slug
        submitted: URL сохранён, диалог закрыт
        dialog: Состояние диалога после отправки
    """

    result: SlugValidationResult
    submitted: bool = Field(False, description="URL сохранён")
    dialog: ChangeURLDialogSchema


class ChangeURLSubmitResponseSchema(BaseResponseSchema):
    """Ответ на отправку диалога."""

    data: ChangeURLSubmitSchema
