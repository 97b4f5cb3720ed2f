"""
Утилиты для работы со slug (URL) канала.

Модуль предоставляет чистые функции:
- normalize_typed: нормализация ввода при каждом нажатии клавиши
- validate_for_submit: проверка slug перед сохранением
- clean_up_urlable: приведение строки к канонической форме slug
- get_shortened_url: сокращение URL команды для отображения
"""

import re
import unicodedata

from app.schemas.v1.channels.base import (
    InvalidSlugSchema,
    SlugRule,
    SlugValidationResult,
    ValidSlugSchema,
)

from .text import transliterate

MIN_URL_LENGTH = 2

# Символы, недопустимые при вводе (регистр ещё не приведён)
TYPED_DISALLOWED_RE = re.compile(r"[^A-Za-z0-9\-_]")
URLABLE_DISALLOWED_RE = re.compile(r"[^a-z0-9\-_]")
WHITESPACE_RE = re.compile(r"\s+")
HYPHENS_RE = re.compile(r"-{2,}")

BOUNDARY_CHARS = ("-", "_")
DOUBLE_UNDERSCORE = "__"


def normalize_typed(raw: str) -> str:
    """
    Нормализует ввод пользователя в поле URL.

    Обрезает пробелы по краям, удаляет всё кроме [A-Za-z0-9-_]
    и приводит к нижнему регистру. Никогда не выбрасывает исключений.

    Args:
        raw: Текст поля ввода

    Returns:
        str: Нормализованный slug (может быть пустым)

    Example:
        >>> normalize_typed("  My Channel! ")
        "mychannel"
    """
    return TYPED_DISALLOWED_RE.sub("", raw.strip()).lower()


def clean_up_urlable(raw: str) -> str:
    """
    Приводит строку к канонической форме slug.

    Детерминирована и идемпотентна, результат состоит только из [a-z0-9-_]:
    - транслитерирует кириллицу и приводит к нижнему регистру
    - убирает диакритику у латинских букв
    - заменяет пробелы на дефисы, удаляет прочие символы
    - схлопывает повторяющиеся дефисы
    - убирает дефисы и подчёркивания по краям

    Двойное подчёркивание внутри не трогается, его ловит проверка правил.

    Args:
        raw: Исходная строка

    Returns:
        str: Канонический slug

    Example:
        >>> clean_up_urlable("Café Town-Square_")
        "cafe-town-square"
    """
    cleaned = transliterate(raw)
    cleaned = "".join(
        char for char in unicodedata.normalize("NFKD", cleaned) if not unicodedata.combining(char)
    )
    cleaned = WHITESPACE_RE.sub("-", cleaned.strip())
    cleaned = URLABLE_DISALLOWED_RE.sub("", cleaned)
    cleaned = HYPHENS_RE.sub("-", cleaned)
    return cleaned.strip("".join(BOUNDARY_CHARS))


def get_shortened_url(url: str = "", get_length: int = 27) -> str:
    """
    Сокращает URL для отображения перед полем ввода.

    URL длиннее 35 символов сворачивается до первых 10 символов, многоточия
    и последних (get_length - 14) символов. Всегда заканчивается на "/".

    Args:
        url: Полный URL
        get_length: Базовая длина сокращённого URL

    Returns:
        str: URL для отображения
    """
    if len(url) > 35:
        sub_length = get_length - 14
        return f"{url[:10]}...{url[len(url) - sub_length:]}/"
    return f"{url}/"


def get_url_violations(url: str) -> list[SlugRule]:
    """
    Собирает все нарушенные правила для slug в фиксированном порядке.

    Проверяется исходное значение, а не очищенное. Если ни одно правило
    не сработало, возвращается общее нарушение INVALID_URL, поэтому список
    никогда не пуст.

    Args:
        url: Исходное значение поля

    Returns:
        list[SlugRule]: Нарушения в порядке проверки
    """
    violations = []

    if len(url) < MIN_URL_LENGTH:
        violations.append(SlugRule.TOO_SHORT)
    if url[:1] in BOUNDARY_CHARS:
        violations.append(SlugRule.MUST_START_WITH_LETTER_OR_NUMBER)
    if len(url) > 1 and url[-1] in BOUNDARY_CHARS:
        violations.append(SlugRule.MUST_END_WITH_LETTER_OR_NUMBER)
    if DOUBLE_UNDERSCORE in url:
        violations.append(SlugRule.NO_DOUBLE_UNDERSCORE)

    # Ошибка, которую не распознало ни одно правило
    if not violations:
        violations.append(SlugRule.INVALID_URL)

    return violations


def is_acceptable_slug(url: str) -> bool:
    """Проверяет, что slug уже канонический, не короче двух символов и без '__'."""
    return (
        clean_up_urlable(url) == url
        and len(url) >= MIN_URL_LENGTH
        and DOUBLE_UNDERSCORE not in url
    )


def validate_for_submit(raw: str) -> SlugValidationResult:
    """
    Проверяет slug перед сохранением.

    Args:
        raw: Значение поля в момент отправки

    Returns:
        ValidSlugSchema: Если slug принят (содержит сам slug)
        InvalidSlugSchema: Иначе, с упорядоченным непустым списком нарушений

    Example:
        >>> validate_for_submit("town-square").status
        "valid"
        >>> [v.rule for v in validate_for_submit("_").violations]
        [SlugRule.TOO_SHORT, SlugRule.MUST_START_WITH_LETTER_OR_NUMBER]
    """
    if is_acceptable_slug(raw):
        return ValidSlugSchema(url=raw)

    return InvalidSlugSchema.from_rules(get_url_violations(raw))
