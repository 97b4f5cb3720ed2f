"""API v1 роутеры."""

from app.routers.base import BaseRouter
from app.routers.v1.channels import ChangeURLDialogRouter, ChannelURLRouter


class APIv1(BaseRouter):
    """
    Агрегатор роутеров для API v1.

    Объединяет все публичные роутеры v1.
    """

    def configure_routes(self):
        """
        Настройка маршрутов для API v1.
        """
        self.router.include_router(ChangeURLDialogRouter().get_router())
        self.router.include_router(ChannelURLRouter().get_router())


__all__ = ["APIv1"]
