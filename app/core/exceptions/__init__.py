from .base import BaseAPIException
from .channels import ChangeURLDialogNotFoundError, ChannelURLTakenError
from .common import ConflictError, NotFoundError
from .handlers import register_exception_handlers

__all__ = [
    # Base
    "BaseAPIException",
    # Common
    "NotFoundError",
    "ConflictError",
    # Handlers
    "register_exception_handlers",
    # Channels
    "ChangeURLDialogNotFoundError",
    "ChannelURLTakenError",
]
