"""
Сервис для проверки состояния приложения и его компонентов.
"""

from app.repository.v1.channels import ChangeURLDialogRepository
from app.services.base import BaseService


class HealthService(BaseService):
    """
    Сервис для проверки состояния приложения.

    Attributes:
        dialog_repository (ChangeURLDialogRepository): Хранилище диалогов смены URL

    Methods:
        check: Проверяет состояние приложения и хранилища диалогов
        check_liveness: Быстрая проверка жизнеспособности
    """

    def __init__(self, dialog_repository: ChangeURLDialogRepository):
        super().__init__()
        self.dialog_repository = dialog_repository

    async def check(self) -> dict[str, str | int | None]:
        """
        Проверяет состояние приложения и хранилища диалогов.

        Returns:
            Dict: Статусы компонентов и количество открытых диалогов
        """
        self.logger.info("Checking application health")

        try:
            open_dialogs = await self.dialog_repository.count()
            dialogs_status = "ok"
        except Exception as e:
            self.logger.warning("Dialog storage health check failed: %s", str(e))
            open_dialogs = None
            dialogs_status = "fail"

        status = {"app": "ok", "dialogs": dialogs_status, "open_dialogs": open_dialogs}

        self.logger.info("Health check completed: %s", status)

        return status

    async def check_liveness(self) -> dict[str, str | int | None]:
        """
        Быстрая проверка жизнеспособности без проверки компонентов.

        Returns:
            Dict: Минимальный словарь со статусом (app, остальные=unknown)
        """
        self.logger.debug("Liveness check")

        return {"app": "ok", "dialogs": "unknown", "open_dialogs": None}
