"""
Middleware для измерения времени выполнения HTTP запросов.

Измеряет время обработки каждого запроса и:
- Добавляет заголовок X-Process-Time-Ms в ответ
- Логирует медленные запросы (> threshold) как WARNING
- Логирует обычные запросы как DEBUG (кроме путей из exclude_paths)

Использование:
    from app.core.middlewares.timing import TimingMiddleware

    app = FastAPI()
    app.add_middleware(TimingMiddleware, slow_threshold_ms=500.0)
"""

import logging
import time
from collections.abc import Sequence

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

logger = logging.getLogger(__name__)

PROCESS_TIME_HEADER = "X-Process-Time-Ms"


class TimingMiddleware(BaseHTTPMiddleware):
    """
    Middleware для измерения и логирования времени выполнения запросов.

    Attributes:
        slow_threshold_ms: Порог медленного запроса в миллисекундах.
        exclude_paths: Пути, быстрые запросы к которым не логируются.

    Example:
        >>> app.add_middleware(TimingMiddleware, slow_threshold_ms=500.0)
        >>> # DEBUG: POST /api/v1/channels/url/validate 1.23ms
        >>> # WARNING: POST /api/v1/channels/url/validate 650.45ms (slow, threshold=500ms)
    """

    def __init__(
        self,
        app,
        slow_threshold_ms: float = 500.0,
        exclude_paths: Sequence[str] = ("/health", "/health/live"),
    ):
        super().__init__(app)
        self.slow_threshold_ms = slow_threshold_ms
        self.exclude_paths = set(exclude_paths)

    async def dispatch(self, request: Request, call_next) -> Response:
        start = time.perf_counter()

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start) * 1000
        response.headers[PROCESS_TIME_HEADER] = f"{duration_ms:.2f}"

        method = request.method
        path = request.url.path

        if duration_ms > self.slow_threshold_ms:
            logger.warning(
                "%s %s %.2fms (slow, threshold=%.0fms)",
                method,
                path,
                duration_ms,
                self.slow_threshold_ms,
            )
        elif path not in self.exclude_paths:
            logger.debug("%s %s %.2fms -> %d", method, path, duration_ms, response.status_code)

        return response
