"""Настройка роутеров приложения."""

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from .health import HealthRouter
from .v1 import APIv1


async def redirect_to_docs() -> RedirectResponse:
    """Перенаправление с корня на документацию /docs."""
    return RedirectResponse(url="/docs")


def setup_routers(app: FastAPI):
    """
    Настраивает все роутеры для приложения FastAPI.

    - GET / - редирект на /docs
    - /health - проверка состояния
    - /api/v1 - API URL каналов
    """
    app.add_api_route("/", redirect_to_docs, methods=["GET"], include_in_schema=False)
    app.include_router(HealthRouter().get_router())

    v1_router = APIv1()
    v1_router.configure_routes()

    app.include_router(v1_router.get_router(), prefix="/api/v1")
