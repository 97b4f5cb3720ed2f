"""Main FastAPI application."""

import logging

from fastapi import FastAPI

from app.core.exceptions import register_exception_handlers
from app.core.logging import setup_logging
from app.core.middlewares import setup_middlewares
from app.core.settings import settings
from app.routers import setup_routers

logger = logging.getLogger(__name__)


def create_application() -> FastAPI:
    """
    Создает и настраивает экземпляр приложения FastAPI.

    Настраивает логирование, регистрирует обработчики исключений,
    подключает middleware и роуты (health, API v1 для URL каналов).

    Returns:
        FastAPI: Настроенный экземпляр приложения FastAPI.
    """
    setup_logging()
    app = FastAPI(**settings.app_params)
    register_exception_handlers(app=app)
    setup_middlewares(app)
    setup_routers(app)

    logger.info("%s %s создано (окружение: %s)", settings.TITLE, settings.VERSION, settings.app_env)
    return app


app = create_application()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, **settings.uvicorn_params)
