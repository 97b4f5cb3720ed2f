"""
Модуль для проверки состояния приложения.

Предоставляет эндпоинты для мониторинга здоровья приложения.
"""

from app.core.dependencies.health import HealthServiceDep
from app.routers.base import BaseRouter
from app.schemas import HealthCheckDataSchema, HealthCheckResponseSchema


class HealthRouter(BaseRouter):
    """
    Роутер для проверки состояния приложения.

    Endpoints:
        GET /health - Проверка состояния приложения и хранилища диалогов
        GET /health/live - Быстрая проверка жизнеспособности приложения
    """

    def __init__(self):
        super().__init__(prefix="health", tags=["Health"])

    def configure(self):
        @self.router.get(
            path="",
            response_model=HealthCheckResponseSchema,
            description="""\
## 🩺 Проверка состояния приложения

Возвращает статусы приложения и хранилища диалогов смены URL.
""",
        )
        async def health_check(
            health_service: HealthServiceDep,
        ) -> HealthCheckResponseSchema:
            status = await health_service.check()
            data = HealthCheckDataSchema(**status)

            return HealthCheckResponseSchema(success=True, message="Все сервисы работают", data=data)

        @self.router.get(
            path="/live",
            response_model=HealthCheckResponseSchema,
            description="""\
## 💓 Быстрая проверка жизнеспособности

Минимальная проверка того, что приложение работает.
""",
        )
        async def liveness_check(
            health_service: HealthServiceDep,
        ) -> HealthCheckResponseSchema:
            status = await health_service.check_liveness()
            data = HealthCheckDataSchema(**status)

            return HealthCheckResponseSchema(success=True, message="Приложение работает", data=data)
