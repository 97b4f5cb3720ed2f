"""Сервисы версии v1."""
from .change_url_dialog import ChangeURLDialog
from .channels import ChannelURLService

__all__ = [
    "ChangeURLDialog",
    "ChannelURLService",
]
