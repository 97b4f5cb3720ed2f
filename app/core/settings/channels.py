"""
Настройки диалога смены URL канала.

Модуль содержит конфигурацию для:
- Ограничений поля ввода slug (максимальная длина)
- Отображения (задержка подсказки, заголовок, текст кнопки)
- Хранения открытых диалогов (TTL)
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class ChannelURLSettings(BaseSettings):
    """
    Настройки диалога смены URL канала.

    Attributes:
        MAX_CHANNELNAME_LENGTH: Максимальная длина поля ввода URL (только для отображения)
        OVERLAY_TIME_DELAY: Задержка показа подсказки с полным URL (мс)
        CHANNELS_PATH: Путь каналов, добавляемый к URL команды
        DEFAULT_TITLE: Заголовок диалога по умолчанию
        DEFAULT_SUBMIT_TEXT: Текст кнопки сохранения по умолчанию
        DIALOG_TTL_SECONDS: Время жизни открытого диалога в хранилище
        URL_TAKEN_MESSAGE: Текст ошибки сервера, если URL уже занят

    Example:
        >>> from app.core.settings import settings
        >>> print(settings.channel_url.MAX_CHANNELNAME_LENGTH)
        64
    """

    # Поле ввода
    MAX_CHANNELNAME_LENGTH: int = 64

    # Отображение
    OVERLAY_TIME_DELAY: int = 400  # ms
    CHANNELS_PATH: str = "/channels"
    DEFAULT_TITLE: str = "Change URL"
    DEFAULT_SUBMIT_TEXT: str = "Save"

    # Хранилище диалогов
    DIALOG_TTL_SECONDS: int = 1800

    URL_TAKEN_MESSAGE: str = "A channel with that URL already exists."

    model_config = SettingsConfigDict(
        env_prefix="CHANNEL_URL__",
        case_sensitive=True,
        extra="ignore",
    )
