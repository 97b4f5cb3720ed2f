"""Схемы для URL (slug) канала и диалога его смены."""

from .base import (
    SLUG_RULE_MESSAGES,
    ChangeURLDialogSchema,
    InvalidSlugSchema,
    NormalizedSlugSchema,
    ShortenedURLSchema,
    SlugRule,
    SlugValidationResult,
    SlugViolationSchema,
    ValidSlugSchema,
)
from .requests import (
    ChangeURLDialogOpenSchema,
    ChangeURLDialogPropsSchema,
    ChangeURLDialogSubmitSchema,
    ShortenURLRequestSchema,
    SlugInputRequestSchema,
)
from .responses import (
    ChangeURLDialogResponseSchema,
    ChangeURLSubmitResponseSchema,
    ChangeURLSubmitSchema,
    NormalizedSlugResponseSchema,
    ShortenedURLResponseSchema,
    SlugValidationResponseSchema,
)

__all__ = [
    # Base
    "SlugRule",
    "SLUG_RULE_MESSAGES",
    "SlugViolationSchema",
    "ValidSlugSchema",
    "InvalidSlugSchema",
    "SlugValidationResult",
    "NormalizedSlugSchema",
    "ShortenedURLSchema",
    "ChangeURLDialogSchema",
    # Requests
    "SlugInputRequestSchema",
    "ShortenURLRequestSchema",
    "ChangeURLDialogOpenSchema",
    "ChangeURLDialogPropsSchema",
    "ChangeURLDialogSubmitSchema",
    # Responses
    "NormalizedSlugResponseSchema",
    "SlugValidationResponseSchema",
    "ShortenedURLResponseSchema",
    "ChangeURLDialogResponseSchema",
    "ChangeURLSubmitSchema",
    "ChangeURLSubmitResponseSchema",
]
