"""
Модуль настройки логирования.

Содержит функцию setup_logging для централизованной настройки логирования приложения.
"""

import logging
import os
from pathlib import Path

from app.core.settings import settings

from .formatters import CustomJsonFormatter, PrettyFormatter

logger = logging.getLogger(__name__)


def _create_file_handler(log_path: Path) -> logging.FileHandler:
    """
    Создаёт файловый обработчик с JSON-форматтером.

    Args:
        log_path: Путь к файлу логов (директория создаётся при необходимости)

    Returns:
        logging.FileHandler: Настроенный обработчик

    Raises:
        PermissionError, OSError: Если файл недоступен для записи
    """
    if not log_path.parent.exists():
        os.makedirs(str(log_path.parent), exist_ok=True)

    file_handler = logging.FileHandler(
        filename=log_path,
        mode=settings.logging.FILE_MODE,
        encoding=settings.logging.ENCODING,
    )
    file_handler.setFormatter(CustomJsonFormatter())
    return file_handler


def setup_logging():
    """
    Настраивает систему логирования в приложении.

    - Очищает все старые обработчики root-логгера
    - Добавляет консольный обработчик с выбранным форматтером (pretty/json)
    - Добавляет файловый обработчик с JSON-форматтером (с резервным путём)
    - Устанавливает уровень логирования согласно настройкам
    """
    root = logging.getLogger()

    # Очищаем старые обработчики
    for handler in list(root.handlers):
        root.removeHandler(handler)

    console_formatter = CustomJsonFormatter() if settings.logging.is_json_format else PrettyFormatter()
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(console_formatter)
    root.addHandler(console_handler)

    log_paths = [
        path for path in (settings.logging.LOG_FILE, settings.logging.FALLBACK_LOG_FILE) if path
    ]
    for log_path in log_paths:
        try:
            root.addHandler(_create_file_handler(Path(log_path)))
            print(f"✅ Логи будут писаться в: {log_path}")
            break
        except (PermissionError, OSError) as e:
            print(f"⚠️ Не удалось использовать файл логов {log_path}: {e}")

    root.setLevel(settings.logging.LOG_LEVEL)

    # Подавляем логи от некоторых библиотек
    for logger_name in settings.logging.QUIET_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    if not log_paths:
        logger.debug("Файловый вывод логов отключён: LOG_FILE и FALLBACK_LOG_FILE пусты")
