"""Схемы запросов для URL (slug) канала."""

from pydantic import Field

from app.schemas.base import BaseRequestSchema


class SlugInputRequestSchema(BaseRequestSchema):
    """Значение поля URL (сырое, как ввёл пользователь)."""

    url: str = Field(..., description="Значение поля URL", examples=["Town Square"])


class ShortenURLRequestSchema(BaseRequestSchema):
    """
    Запрос на сокращение URL для отображения.

    Attributes:
        url: Полный URL
        get_length: Базовая длина сокращённого URL
    """

    url: str = Field("", description="Полный URL")
    get_length: int = Field(27, ge=14, description="Базовая длина сокращённого URL")


class ChangeURLDialogOpenSchema(BaseRequestSchema):
    """
    Открытие диалога смены URL.

    Attributes:
        current_url: Текущий URL канала
        current_team_url: URL команды
        title: Заголовок диалога (по умолчанию из настроек)
        submit_button_text: Текст кнопки (по умолчанию из настроек)
        server_error: Ошибка сервера от предыдущей операции
    """

    current_url: str = Field("", description="Текущий URL канала", examples=["town-square"])
    current_team_url: str = Field(
        ...,
        min_length=1,
        description="URL команды",
        examples=["https://chat.example.com/team"],
    )
    title: str | None = Field(None, description="Заголовок диалога")
    submit_button_text: str | None = Field(None, description="Текст кнопки сохранения")
    server_error: str | None = Field(None, description="Ошибка сервера")


class ChangeURLDialogPropsSchema(BaseRequestSchema):
    """
    Внешнее обновление свойств диалога.

    Все поля опциональны: применяются только переданные. Переданный
    current_url игнорируется, пока пользователь редактирует поле.
    Явный null в server_error сбрасывает ошибку сервера.
    """

    current_url: str | None = Field(None, description="Текущий URL канала")
    current_team_url: str | None = Field(None, min_length=1, description="URL команды")
    title: str | None = Field(None, description="Заголовок диалога")
    submit_button_text: str | None = Field(None, description="Текст кнопки сохранения")
    server_error: str | None = Field(None, description="Ошибка сервера")


class ChangeURLDialogSubmitSchema(BaseRequestSchema):
    """Отправка диалога. Без url берётся текущее значение поля."""

    url: str | None = Field(None, description="Значение поля в момент отправки")
