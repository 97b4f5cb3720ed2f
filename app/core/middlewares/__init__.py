from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.settings import settings

from .timing import TimingMiddleware


def setup_middlewares(app: FastAPI):
    """
    Настраивает все middleware для приложения FastAPI.

    ВАЖНО: В Starlette middleware выполняются в ОБРАТНОМ порядке добавления!
    CORSMiddleware добавляется ПОСЛЕДНИМ, чтобы выполняться ПЕРВЫМ.
    """
    app.add_middleware(TimingMiddleware, slow_threshold_ms=settings.SLOW_THRESHOLD_MS)
    app.add_middleware(CORSMiddleware, **settings.cors_params)
