"""
Базовые схемы для URL (slug) канала.

Содержит перечень правил формирования slug, схемы нарушений,
результат проверки (принят / отклонён) и состояние диалога смены URL.
"""

from enum import Enum
from typing import Annotated, Literal

from pydantic import Field

from app.schemas.base import CommonBaseSchema


class SlugRule(str, Enum):
    """Правила формирования slug в порядке проверки."""

    TOO_SHORT = "too_short"
    MUST_START_WITH_LETTER_OR_NUMBER = "must_start_with_letter_or_number"
    MUST_END_WITH_LETTER_OR_NUMBER = "must_end_with_letter_or_number"
    NO_DOUBLE_UNDERSCORE = "no_double_underscore"
    INVALID_URL = "invalid_url"

    @property
    def message_id(self) -> str:
        """Идентификатор сообщения для локализации на клиенте."""
        return SLUG_RULE_MESSAGES[self][0]

    @property
    def message(self) -> str:
        """Сообщение по умолчанию."""
        return SLUG_RULE_MESSAGES[self][1]


SLUG_RULE_MESSAGES: dict[SlugRule, tuple[str, str]] = {
    SlugRule.TOO_SHORT: ("change_url.longer", "URL must be two or more characters."),
    SlugRule.MUST_START_WITH_LETTER_OR_NUMBER: (
        "change_url.startWithLetter",
        "URL must start with a letter or number.",
    ),
    SlugRule.MUST_END_WITH_LETTER_OR_NUMBER: (
        "change_url.endWithLetter",
        "URL must end with a letter or number.",
    ),
    SlugRule.NO_DOUBLE_UNDERSCORE: (
        "change_url.noUnderscore",
        "URL can not contain two underscores in a row.",
    ),
    SlugRule.INVALID_URL: ("change_url.invalidUrl", "Invalid URL"),
}


class SlugViolationSchema(CommonBaseSchema):
    """
    Нарушение одного правила формирования slug.

    Attributes:
        rule (SlugRule): Стабильный идентификатор правила
        message_id (str): Идентификатор сообщения для локализации
        message (str): Сообщение по умолчанию
    """

    rule: SlugRule = Field(..., description="Нарушенное правило", examples=["too_short"])
    message_id: str = Field(..., description="Идентификатор сообщения", examples=["change_url.longer"])
    message: str = Field(
        ...,
        description="Сообщение по умолчанию",
        examples=["URL must be two or more characters."],
    )

    @classmethod
    def from_rule(cls, rule: SlugRule) -> "SlugViolationSchema":
        return cls(rule=rule, message_id=rule.message_id, message=rule.message)


class ValidSlugSchema(CommonBaseSchema):
    """
    Slug принят.

    Attributes:
        status: Всегда "valid"
        url (str): Принятый slug
    """

    status: Literal["valid"] = "valid"
    url: str = Field(..., description="Принятый slug", examples=["town-square"])

    @property
    def is_valid(self) -> bool:
        return True


class InvalidSlugSchema(CommonBaseSchema):
    """
    Slug отклонён.

    Attributes:
        status: Всегда "invalid"
        violations (list[SlugViolationSchema]): Нарушения в порядке проверки, минимум одно
    """

    status: Literal["invalid"] = "invalid"
    violations: list[SlugViolationSchema] = Field(
        ...,
        min_length=1,
        description="Нарушенные правила в порядке проверки",
    )

    @classmethod
    def from_rules(cls, rules: list[SlugRule]) -> "InvalidSlugSchema":
        return cls(violations=[SlugViolationSchema.from_rule(rule) for rule in rules])

    @property
    def is_valid(self) -> bool:
        return False

    @property
    def rules(self) -> list[SlugRule]:
        return [violation.rule for violation in self.violations]

    @property
    def messages(self) -> list[str]:
        return [violation.message for violation in self.violations]


SlugValidationResult = Annotated[
    ValidSlugSchema | InvalidSlugSchema,
    Field(discriminator="status"),
]


class NormalizedSlugSchema(CommonBaseSchema):
    """Нормализованное значение поля ввода."""

    url: str = Field(..., description="Нормализованный slug", examples=["town-square"])


class ShortenedURLSchema(CommonBaseSchema):
    """
    URL для отображения.

    Attributes:
        url (str): Полный URL (текст подсказки)
        short_url (str): Сокращённый URL
    """

    url: str = Field(..., description="Полный URL")
    short_url: str = Field(..., description="Сокращённый URL для отображения")


class ChangeURLDialogSchema(CommonBaseSchema):
    """
    Состояние диалога смены URL канала.

    Содержит всё необходимое клиенту для отрисовки диалога: значение поля,
    ограничения ввода, адрес команды (полный и сокращённый), ошибки.

    Attributes:
        dialog_id (str): Идентификатор диалога
        title (str): Заголовок диалога
        submit_button_text (str): Текст кнопки сохранения
        current_url (str): Текущее значение поля ввода
        current_team_url (str): URL команды
        full_url (str): Полный адрес каналов команды (текст подсказки)
        short_url (str): Сокращённый адрес для отображения перед полем
        max_length (int): Максимальная длина поля ввода
        overlay_delay_ms (int): Задержка показа подсказки
        user_edit (bool): Пользователь редактировал поле
        url_error (list[SlugViolationSchema]): Локальные ошибки проверки slug
        server_error (str | None): Ошибка сервера, переданная извне
        has_error (bool): Поле нужно подсветить как ошибочное
        error (list[str]): Строки ошибки для отображения (каждая с новой строки)
    """

    dialog_id: str = Field(..., description="Идентификатор диалога")
    title: str = Field(..., description="Заголовок диалога", examples=["Change URL"])
    submit_button_text: str = Field(..., description="Текст кнопки сохранения", examples=["Save"])
    current_url: str = Field("", description="Текущее значение поля ввода")
    current_team_url: str = Field(..., description="URL команды")
    full_url: str = Field(..., description="Полный адрес каналов команды")
    short_url: str = Field(..., description="Сокращённый адрес для отображения")
    max_length: int = Field(..., description="Максимальная длина поля ввода")
    overlay_delay_ms: int = Field(..., description="Задержка показа подсказки, мс")
    user_edit: bool = Field(False, description="Пользователь редактировал поле")
    url_error: list[SlugViolationSchema] = Field(default_factory=list, description="Ошибки slug")
    server_error: str | None = Field(None, description="Ошибка сервера")
    has_error: bool = Field(False, description="Поле содержит локальную ошибку")
    error: list[str] = Field(default_factory=list, description="Строки ошибки для отображения")
