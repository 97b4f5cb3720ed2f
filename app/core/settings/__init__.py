"""
Модуль инициализации настроек приложения.

Этот модуль предоставляет глобальный доступ к объекту настроек приложения (`settings`),
используя кэширование через декоратор `lru_cache`. Объект настроек (`Settings`)
создаётся только один раз за время жизни процесса, даже при многократных
импортах или вызовах.

Экспортируемые объекты:
- settings: Глобальный экземпляр настроек приложения.
- Settings: Класс настроек приложения.
- get_settings: Получение настроек из кэша.
"""

from functools import lru_cache

from .base import Settings
from .channels import ChannelURLSettings
from .logging import LoggingSettings


class CompositeSettings(Settings):
    """Композитный класс настроек."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.logging = LoggingSettings()
        self.channel_url = ChannelURLSettings()


@lru_cache
def get_settings() -> CompositeSettings:
    """Получение настроек приложения из кэша."""
    return CompositeSettings()


settings = get_settings()

__all__ = ["settings", "Settings", "get_settings"]
