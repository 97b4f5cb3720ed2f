"""
Общие утилиты проекта.

Exports:
    - transliterate: Транслитерация русского текста в латиницу (ГОСТ 7.79-2000)
    - normalize_typed: Нормализация ввода в поле URL канала
    - validate_for_submit: Проверка slug перед сохранением
    - clean_up_urlable: Приведение строки к канонической форме slug
    - get_shortened_url: Сокращение URL для отображения
"""

from .slug import (
    clean_up_urlable,
    get_shortened_url,
    get_url_violations,
    normalize_typed,
    validate_for_submit,
)
from .text import transliterate

__all__ = [
    "transliterate",
    "normalize_typed",
    "validate_for_submit",
    "clean_up_urlable",
    "get_shortened_url",
    "get_url_violations",
]
