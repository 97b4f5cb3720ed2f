"""
Зависимости для сервиса URL каналов.

Providers:
    - get_dialog_repository: Общее хранилище диалогов смены URL (одно на процесс)
    - get_channel_repository: Общий реестр занятых URL (один на процесс)
    - get_channel_url_service: Провайдер для ChannelURLService

Typed Dependencies:
    - ChannelURLServiceDep: Типизированная зависимость для ChannelURLService

Usage:
    ```python
    from app.core.dependencies import ChannelURLServiceDep

    @router.post("/validate")
    async def validate(data: SlugInputRequestSchema, service: ChannelURLServiceDep):
        return service.validate(data.url)
    ```
"""

import logging
from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from app.core.settings import settings
from app.repository.v1.channels import ChangeURLDialogRepository, ChannelURLRepository
from app.services.v1.channels import ChannelURLService

logger = logging.getLogger(__name__)


@lru_cache
def get_dialog_repository() -> ChangeURLDialogRepository:
    """Хранилище диалогов живёт всё время работы процесса."""
    logger.debug("Создание хранилища диалогов смены URL")
    return ChangeURLDialogRepository(ttl=settings.channel_url.DIALOG_TTL_SECONDS)


@lru_cache
def get_channel_repository() -> ChannelURLRepository:
    """Реестр занятых URL живёт всё время работы процесса."""
    logger.debug("Создание реестра URL каналов")
    return ChannelURLRepository()


DialogRepositoryDep = Annotated[ChangeURLDialogRepository, Depends(get_dialog_repository)]
ChannelRepositoryDep = Annotated[ChannelURLRepository, Depends(get_channel_repository)]


def get_channel_url_service(
    dialog_repository: DialogRepositoryDep,
    channel_repository: ChannelRepositoryDep,
) -> ChannelURLService:
    """
    Провайдер для ChannelURLService.

    Args:
        dialog_repository: Хранилище диалогов смены URL
        channel_repository: Реестр занятых URL

    Returns:
        ChannelURLService: Настроенный сервис URL каналов
    """
    logger.debug("Создание экземпляра ChannelURLService")
    return ChannelURLService(
        dialog_repository=dialog_repository,
        channel_repository=channel_repository,
    )


ChannelURLServiceDep = Annotated[ChannelURLService, Depends(get_channel_url_service)]
