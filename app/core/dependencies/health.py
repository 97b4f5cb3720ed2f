"""
Зависимости для сервиса проверки здоровья.

Providers:
    - get_health_service: Провайдер для HealthService

Typed Dependencies:
    - HealthServiceDep: Типизированная зависимость для HealthService
"""

import logging
from typing import Annotated

from fastapi import Depends

from app.core.dependencies.channels import DialogRepositoryDep
from app.services.health import HealthService

logger = logging.getLogger(__name__)


def get_health_service(dialog_repository: DialogRepositoryDep) -> HealthService:
    """
    Провайдер для HealthService.

    Args:
        dialog_repository: Хранилище диалогов смены URL

    Returns:
        HealthService: Настроенный сервис проверки здоровья
    """
    logger.debug("Создание экземпляра HealthService")
    return HealthService(dialog_repository=dialog_repository)


HealthServiceDep = Annotated[HealthService, Depends(get_health_service)]
