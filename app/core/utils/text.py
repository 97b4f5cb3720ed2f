"""
Утилиты для работы с текстом.

Транслитерация кириллицы в латиницу (ГОСТ 7.79-2000) перед очисткой slug.
"""

# Словарь транслитерации русских букв в латиницу (ГОСТ 7.79-2000)
TRANSLIT_MAP = {
    "а": "a",
    "б": "b",
    "в": "v",
    "г": "g",
    "д": "d",
    "е": "e",
    "ё": "e",
    "ж": "zh",
    "з": "z",
    "и": "i",
    "й": "i",
    "к": "k",
    "л": "l",
    "м": "m",
    "н": "n",
    "о": "o",
    "п": "p",
    "р": "r",
    "с": "s",
    "т": "t",
    "у": "u",
    "ф": "f",
    "х": "h",
    "ц": "ts",
    "ч": "ch",
    "ш": "sh",
    "щ": "sch",
    "ъ": "",
    "ы": "y",
    "ь": "",
    "э": "e",
    "ю": "iu",
    "я": "ia",
}

TRANSLIT_TABLE = str.maketrans(TRANSLIT_MAP)


def transliterate(text: str) -> str:
    """
    Приводит текст к нижнему регистру и транслитерирует кириллицу.

    Латиница и прочие символы остаются как есть.

    Example:
        >>> transliterate("Канал Town Square")
        "kanal town square"
        >>> transliterate("Объявления")
        "obiavleniia"
    """
    if not text:
        return ""

    return text.lower().translate(TRANSLIT_TABLE)
