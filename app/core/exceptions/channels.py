"""
Исключения для диалога смены URL канала.

Ошибки формата slug сюда не относятся: они возвращаются как данные
(список нарушений), а не выбрасываются.
"""

from typing import Any

from app.core.settings import settings

from .common import ConflictError, NotFoundError


class ChangeURLDialogNotFoundError(NotFoundError):
    """
    Диалог смены URL не найден (не открывался, закрыт или истёк TTL).

    HTTP Status: 404 Not Found
    """

    def __init__(self, dialog_id: str, extra: dict[Any, Any] | None = None):
        super().__init__(
            detail=f"Диалог смены URL '{dialog_id}' не найден",
            field="dialog_id",
            value=dialog_id,
            error_type="change_url_dialog_not_found",
            extra=extra,
        )


class ChannelURLTakenError(ConflictError):
    """
    URL уже занят другим каналом команды.

    HTTP Status: 409 Conflict

    Attributes:
        url: Занятый slug.
        team_url: URL команды.
    """

    def __init__(
        self,
        url: str,
        team_url: str,
        detail: str | None = None,
        extra: dict[Any, Any] | None = None,
    ):
        if extra is None:
            extra = {}

        extra.update({"url": url, "team_url": team_url})
        self.url = url
        self.team_url = team_url

        super().__init__(
            detail=detail or settings.channel_url.URL_TAKEN_MESSAGE,
            error_type="channel_url_taken",
            extra=extra,
        )
