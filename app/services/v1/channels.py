"""
Сервис для работы с URL (slug) каналов.

Предоставляет методы для:
- Нормализации ввода и проверки slug
- Сокращения URL команды для отображения
- Управления диалогом смены URL (открытие, обновление свойств, ввод, отправка, отмена)
"""

import uuid
from typing import Any

from app.core.exceptions import ChangeURLDialogNotFoundError, ChannelURLTakenError
from app.core.utils.slug import get_shortened_url, normalize_typed, validate_for_submit
from app.repository.v1.channels import ChangeURLDialogRepository, ChannelURLRepository
from app.schemas.v1.channels import (
    ChangeURLDialogOpenSchema,
    ChangeURLDialogSchema,
    ChangeURLSubmitSchema,
    NormalizedSlugSchema,
    ShortenedURLSchema,
    SlugValidationResult,
)
from app.services.base import BaseService
from app.services.v1.change_url_dialog import ChangeURLDialog


class ChannelURLService(BaseService):
    """
    Сервис для работы с URL каналов.

    Attributes:
        dialog_repository (ChangeURLDialogRepository): Хранилище открытых диалогов
        channel_repository (ChannelURLRepository): Реестр занятых URL

    Example:
        >>> service = ChannelURLService(dialog_repository, channel_repository)
        >>> dialog = await service.open_dialog(ChangeURLDialogOpenSchema(current_team_url="https://chat/team"))
        >>> await service.change_url(dialog.dialog_id, "Town Square")
        >>> submit = await service.submit(dialog.dialog_id)
    """

    def __init__(
        self,
        dialog_repository: ChangeURLDialogRepository,
        channel_repository: ChannelURLRepository,
    ):
        super().__init__()
        self.dialog_repository = dialog_repository
        self.channel_repository = channel_repository

    def normalize(self, raw: str) -> NormalizedSlugSchema:
        """Нормализует значение поля ввода."""
        return NormalizedSlugSchema(url=normalize_typed(raw))

    def validate(self, raw: str) -> SlugValidationResult:
        """Проверяет slug без открытия диалога."""
        result = validate_for_submit(raw)
        self.logger.debug("Проверка slug %r: %s", raw, result.status)
        return result

    def shorten(self, url: str, get_length: int = 27) -> ShortenedURLSchema:
        """Сокращает URL для отображения."""
        return ShortenedURLSchema(url=url, short_url=get_shortened_url(url, get_length))

    async def open_dialog(self, data: ChangeURLDialogOpenSchema) -> ChangeURLDialogSchema:
        """
        Открывает новый диалог смены URL.

        Args:
            data: Начальные свойства диалога

        Returns:
            ChangeURLDialogSchema: Состояние открытого диалога
        """
        dialog = ChangeURLDialog(dialog_id=str(uuid.uuid4()), **data.model_dump())
        await self.dialog_repository.save(dialog)

        self.logger.info(
            "Открыт диалог смены URL %s",
            dialog.dialog_id,
            extra={"team_url": dialog.current_team_url, "url": dialog.current_url},
        )
        return dialog.to_schema()

    async def get_dialog(self, dialog_id: str) -> ChangeURLDialogSchema:
        """Возвращает состояние диалога."""
        dialog = await self._get_dialog(dialog_id)
        return dialog.to_schema()

    async def update_props(self, dialog_id: str, props: dict[str, Any]) -> ChangeURLDialogSchema:
        """
        Применяет внешнее обновление свойств диалога.

        Args:
            dialog_id: Идентификатор диалога
            props: Переданные свойства (только явно указанные клиентом)

        Returns:
            ChangeURLDialogSchema: Состояние диалога
        """
        dialog = await self._get_dialog(dialog_id)
        dialog.receive_props(**props)
        await self.dialog_repository.save(dialog)
        return dialog.to_schema()

    async def change_url(self, dialog_id: str, raw: str) -> ChangeURLDialogSchema:
        """Обрабатывает ввод пользователя в поле URL."""
        dialog = await self._get_dialog(dialog_id)
        dialog.change_url(raw)
        await self.dialog_repository.save(dialog)
        return dialog.to_schema()

    async def submit(self, dialog_id: str, url: str | None = None) -> ChangeURLSubmitSchema:
        """
        Отправляет диалог.

        Принятый slug сохраняется в реестре команды и диалог закрывается.
        Если URL уже занят, ошибка передаётся в диалог как ошибка сервера,
        диалог остаётся открытым, а отправленный slug остаётся в поле
        как несохранённый ввод.

        Args:
            dialog_id: Идентификатор диалога
            url: Значение поля в момент отправки (по умолчанию текущее)

        Returns:
            ChangeURLSubmitSchema: Результат проверки и состояние диалога
        """
        dialog = await self._get_dialog(dialog_id)
        accepted: list[str] = []

        result = dialog.submit(on_submit=accepted.append, url=url)

        submitted = False
        if accepted:
            try:
                await self.channel_repository.rename(
                    dialog.current_team_url,
                    old_url=dialog.channel_url,
                    new_url=accepted[0],
                )
            except ChannelURLTakenError as e:
                dialog.keep_draft(accepted[0])
                dialog.receive_props(server_error=e.detail)
                await self.dialog_repository.save(dialog)
            else:
                submitted = True
                await self.dialog_repository.delete(dialog_id)
                self.logger.info("Диалог %s: URL сохранён (%s)", dialog_id, accepted[0])
        else:
            await self.dialog_repository.save(dialog)

        return ChangeURLSubmitSchema(result=result, submitted=submitted, dialog=dialog.to_schema())

    async def cancel(self, dialog_id: str) -> ChangeURLDialogSchema:
        """Отменяет диалог: сбрасывает состояние и закрывает его."""
        dialog = await self._get_dialog(dialog_id)
        dialog.cancel(on_dismissed=lambda: self._dismiss(dialog_id))
        await self.dialog_repository.delete(dialog_id)
        return dialog.to_schema()

    async def count_dialogs(self) -> int:
        return await self.dialog_repository.count()

    def _dismiss(self, dialog_id: str) -> None:
        self.logger.info("Диалог %s закрыт без сохранения", dialog_id)

    async def _get_dialog(self, dialog_id: str) -> ChangeURLDialog:
        dialog = await self.dialog_repository.get(dialog_id)
        if dialog is None:
            raise ChangeURLDialogNotFoundError(dialog_id)
        return dialog
