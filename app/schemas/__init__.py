"""
Схемы API.

Экспортирует общие схемы, схемы health check и схемы URL канала.
"""

# Common (из base.py)
from .base import (
    BaseRequestSchema,
    BaseResponseSchema,
    CommonBaseSchema,
    ErrorResponseSchema,
    ErrorSchema,
)

# Health
from .health import (
    HealthCheckDataSchema,
    HealthCheckResponseSchema,
)

# Channels
from .v1.channels import (
    ChangeURLDialogOpenSchema,
    ChangeURLDialogPropsSchema,
    ChangeURLDialogResponseSchema,
    ChangeURLDialogSchema,
    ChangeURLDialogSubmitSchema,
    ChangeURLSubmitResponseSchema,
    ChangeURLSubmitSchema,
    InvalidSlugSchema,
    NormalizedSlugResponseSchema,
    NormalizedSlugSchema,
    ShortenedURLResponseSchema,
    ShortenedURLSchema,
    ShortenURLRequestSchema,
    SlugInputRequestSchema,
    SlugRule,
    SlugValidationResponseSchema,
    SlugValidationResult,
    SlugViolationSchema,
    ValidSlugSchema,
)

__all__ = [
    # Common
    "CommonBaseSchema",
    "BaseRequestSchema",
    "BaseResponseSchema",
    "ErrorSchema",
    "ErrorResponseSchema",

    # Health
    "HealthCheckDataSchema",
    "HealthCheckResponseSchema",

    # Channels
    "SlugRule",
    "SlugViolationSchema",
    "ValidSlugSchema",
    "InvalidSlugSchema",
    "SlugValidationResult",
    "NormalizedSlugSchema",
    "ShortenedURLSchema",
    "ChangeURLDialogSchema",
    "SlugInputRequestSchema",
    "ShortenURLRequestSchema",
    "ChangeURLDialogOpenSchema",
    "ChangeURLDialogPropsSchema",
    "ChangeURLDialogSubmitSchema",
    "NormalizedSlugResponseSchema",
    "SlugValidationResponseSchema",
    "ShortenedURLResponseSchema",
    "ChangeURLDialogResponseSchema",
    "ChangeURLSubmitSchema",
    "ChangeURLSubmitResponseSchema",
]
