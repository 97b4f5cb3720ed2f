"""
Модуль зависимостей FastAPI.

Содержит зависимости для внедрения в роуты и сервисы приложения.
"""

from .channels import (
    ChannelRepositoryDep,
    ChannelURLServiceDep,
    DialogRepositoryDep,
    get_channel_repository,
    get_channel_url_service,
    get_dialog_repository,
)
from .health import HealthServiceDep

__all__ = [
    # Channel URL dependencies
    "ChannelURLServiceDep",
    "DialogRepositoryDep",
    "ChannelRepositoryDep",
    "get_channel_url_service",
    "get_dialog_repository",
    "get_channel_repository",
    # Health dependencies
    "HealthServiceDep",
]
