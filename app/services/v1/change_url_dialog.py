"""
Контроллер состояния диалога смены URL канала.

Состояния:
    Pristine (user_edit=False) -> Edited (user_edit=True) -> отправка:
        - slug принят: вызывается on_submit, состояние сбрасывается в Pristine
        - slug отклонён: url_error заполняется, остаёмся в Edited

Пока пользователь редактирует поле, внешнее обновление current_url
не применяется, чтобы не затереть несохранённый ввод.
"""

import logging
from collections.abc import Callable
from typing import Any

from app.core.settings import settings
from app.core.utils.slug import get_shortened_url, normalize_typed, validate_for_submit
from app.schemas.v1.channels import (
    ChangeURLDialogSchema,
    SlugValidationResult,
    SlugViolationSchema,
)

logger = logging.getLogger(__name__)

# Свойства, которые диалог принимает извне
DIALOG_PROPS = ("current_url", "current_team_url", "title", "submit_button_text", "server_error")


class ChangeURLDialog:
    """
    Состояние одного диалога смены URL.

    Attributes:
        dialog_id: Идентификатор диалога
        current_url: Текущее значение поля ввода
        current_team_url: URL команды
        channel_url: Последний URL канала, полученный извне
        title: Заголовок диалога
        submit_button_text: Текст кнопки сохранения
        url_error: Локальные ошибки проверки slug
        server_error: Ошибка сервера, переданная извне
        user_edit: Пользователь редактировал поле с последнего сброса
    """

    def __init__(
        self,
        dialog_id: str,
        current_team_url: str,
        current_url: str = "",
        title: str | None = None,
        submit_button_text: str | None = None,
        server_error: str | None = None,
    ):
        self.dialog_id = dialog_id
        self.current_url = current_url
        self.current_team_url = current_team_url
        self.channel_url = current_url
        self.title = title or settings.channel_url.DEFAULT_TITLE
        self.submit_button_text = submit_button_text or settings.channel_url.DEFAULT_SUBMIT_TEXT
        self.url_error: list[SlugViolationSchema] = []
        self.server_error = server_error
        self.user_edit = False

    def receive_props(self, **props: Any) -> None:
        """
        Применяет внешнее обновление свойств.

        current_url применяется только пока пользователь не редактирует поле,
        остальные свойства применяются всегда.

        Args:
            **props: Подмножество DIALOG_PROPS

        Raises:
            TypeError: Если передано неизвестное свойство
        """
        unknown = set(props) - set(DIALOG_PROPS)
        if unknown:
            raise TypeError(f"Неизвестные свойства диалога: {', '.join(sorted(unknown))}")

        if "current_url" in props:
            self.channel_url = props["current_url"]
            if self.user_edit:
                logger.debug("Диалог %s: внешний URL проигнорирован во время редактирования", self.dialog_id)
            else:
                self.current_url = props["current_url"]

        if props.get("current_team_url"):
            self.current_team_url = props["current_team_url"]
        if props.get("title"):
            self.title = props["title"]
        if props.get("submit_button_text"):
            self.submit_button_text = props["submit_button_text"]
        if "server_error" in props:
            self.server_error = props["server_error"]

    def change_url(self, raw: str) -> str:
        """Нормализует ввод пользователя и помечает поле как отредактированное."""
        self.current_url = normalize_typed(raw)
        self.user_edit = True
        return self.current_url

    def reset(self) -> None:
        """Сбрасывает ошибку и флаг редактирования."""
        self.url_error = []
        self.user_edit = False

    def keep_draft(self, url: str) -> None:
        """Возвращает отправленный slug в поле как несохранённый ввод."""
        self.current_url = url
        self.user_edit = True

    def submit(
        self,
        on_submit: Callable[[str], None],
        url: str | None = None,
    ) -> SlugValidationResult:
        """
        Проверяет slug и при успехе вызывает on_submit.

        При ошибке on_submit не вызывается, а url_error заменяется
        новым списком нарушений.

        Args:
            on_submit: Обработчик принятого slug
            url: Значение поля в момент отправки (по умолчанию current_url)

        Returns:
            SlugValidationResult: Результат проверки
        """
        url = self.current_url if url is None else url
        result = validate_for_submit(url)

        if not result.is_valid:
            self.url_error = list(result.violations)
            logger.info(
                "Диалог %s: URL отклонён",
                self.dialog_id,
                extra={"url": url, "rules": [rule.value for rule in result.rules]},
            )
            return result

        self.reset()
        on_submit(url)
        return result

    def cancel(self, on_dismissed: Callable[[], None]) -> None:
        """Сбрасывает локальное состояние и вызывает on_dismissed."""
        self.reset()
        on_dismissed()

    @property
    def full_url(self) -> str:
        return f"{self.current_team_url}{settings.channel_url.CHANNELS_PATH}"

    @property
    def error_lines(self) -> list[str]:
        """
        Строки ошибки для отображения.

        Локальные ошибки имеют приоритет, ошибка сервера показывается
        только при их отсутствии.
        """
        if self.url_error:
            return [violation.message for violation in self.url_error]
        if self.server_error:
            return [self.server_error]
        return []

    def to_schema(self) -> ChangeURLDialogSchema:
        return ChangeURLDialogSchema(
            dialog_id=self.dialog_id,
            title=self.title,
            submit_button_text=self.submit_button_text,
            current_url=self.current_url,
            current_team_url=self.current_team_url,
            full_url=self.full_url,
            short_url=get_shortened_url(self.full_url),
            max_length=settings.channel_url.MAX_CHANNELNAME_LENGTH,
            overlay_delay_ms=settings.channel_url.OVERLAY_TIME_DELAY,
            user_edit=self.user_edit,
            url_error=self.url_error,
            server_error=self.server_error,
            has_error=bool(self.url_error),
            error=self.error_lines,
        )
