"""
Модуль logging.py — настройки логирования для приложения.

Содержит класс LoggingSettings для централизованного хранения параметров логирования:
уровень логов, формат, параметры файлового и консольного вывода.

Экспортируемые объекты:
- LoggingSettings: Класс настроек логирования (через pydantic).
"""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """
    Конфигурация логирования приложения.

    Атрибуты:
        LOG_LEVEL (str): Уровень логирования (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        LOG_FORMAT (str): Формат логирования консоли (pretty, json).
        LOG_FILE (str): Путь к файлу логов. Пустая строка отключает файловый вывод.
        FALLBACK_LOG_FILE (str): Резервный путь, если основной недоступен.
        ENCODING (str): Кодировка файла логов.
        FILE_MODE (str): Режим открытия файла логов.
        QUIET_LOGGERS (list[str]): Логгеры сторонних библиотек с уровнем WARNING.
    """

    LOG_LEVEL: str = "DEBUG"
    LOG_FORMAT: str = "pretty"  # pretty, json
    LOG_FILE: str = "./logs/app.log" if os.name == "nt" else "/var/log/app.log"
    FALLBACK_LOG_FILE: str = "./logs/app.log"
    ENCODING: str = "utf-8"
    FILE_MODE: str = "a"

    QUIET_LOGGERS: list[str] = [
        "python_multipart",
        "httpx",
        "httpcore",
        "uvicorn.access",
    ]

    PRETTY_FORMAT: str = (
        "\033[1;36m%(asctime)s\033[0m - \033[1;32m%(name)s\033[0m - \033[1;33m%(levelname)s\033[0m - %(message)s"
    )

    JSON_FORMAT: dict = {
        "timestamp": "%(asctime)s",
        "level": "%(levelname)s",
        "logger": "%(name)s",
        "module": "%(module)s",
        "func": "%(funcName)s",
        "message": "%(message)s",
    }

    @property
    def is_json_format(self) -> bool:
        """Проверяет, используется ли JSON формат"""
        return self.LOG_FORMAT.lower() == "json"

    model_config = SettingsConfigDict(extra="ignore")
