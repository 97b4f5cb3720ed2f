"""Базовый класс для всех роутеров."""

from collections.abc import Sequence

from fastapi import APIRouter, Depends


class BaseRouter:
    """
    Базовый класс для всех роутеров.

    Предоставляет общий функционал для создания маршрутов.

    Attributes:
        router (APIRouter): Базовый FastAPI роутер
        _dependencies (List[Depends]): Список глобальных зависимостей для роутера
    """

    def __init__(
        self,
        prefix: str = "",
        tags: Sequence[str] | None = None,
        dependencies: list[Depends] | None = None,
    ):
        """
        Инициализирует базовый роутер.

        Args:
            prefix: Префикс URL для всех маршрутов
            tags: Список тегов для документации Swagger
            dependencies: Список глобальных зависимостей
        """
        self._dependencies = dependencies or []
        self.router = APIRouter(
            prefix=f"/{prefix}" if prefix else "",
            tags=tags or [],
            dependencies=self._dependencies,
        )
        self.configure()

    def configure(self):
        """Переопределяется в дочерних классах для настройки роутов"""

    def get_router(self) -> APIRouter:
        """
        Возвращает настроенный FastAPI роутер.

        Returns:
            APIRouter: Настроенный FastAPI роутер
        """
        return self.router
