"""Tests for slug normalization, cleanup and validation."""

import re

import pytest
from hypothesis import assume, given, settings
from hypothesis import strategies as st

from app.core.utils.slug import (
    clean_up_urlable,
    get_shortened_url,
    get_url_violations,
    normalize_typed,
    validate_for_submit,
)
from app.schemas.v1.channels import InvalidSlugSchema, SlugRule, ValidSlugSchema

SLUG_ALPHABET_RE = re.compile(r"[a-z0-9_-]*")


class TestNormalizeTyped:
    def test_trims_filters_and_lowercases(self):
        assert normalize_typed("  Town Square! ") == "townsquare"

    def test_keeps_hyphen_and_underscore(self):
        assert normalize_typed("Off-Topic_2") == "off-topic_2"

    def test_drops_non_ascii_letters(self):
        assert normalize_typed("Канал-1") == "-1"

    def test_empty_input(self):
        assert normalize_typed("") == ""
        assert normalize_typed("   ") == ""

    @settings(max_examples=200, deadline=None)
    @given(raw=st.text())
    def test_output_alphabet_and_idempotence(self, raw: str) -> None:
        normalized = normalize_typed(raw)

        assert SLUG_ALPHABET_RE.fullmatch(normalized)
        assert normalized == re.sub(r"[^A-Za-z0-9_-]", "", raw.strip()).lower()
        assert normalize_typed(normalized) == normalized


class TestCleanUpUrlable:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("validslug", "validslug"),
            ("ab cd", "ab-cd"),
            ("-abc", "abc"),
            ("abc_", "abc"),
            ("Town   Square", "town-square"),
            ("a---b", "a-b"),
            ("Café Münchën", "cafe-munchen"),
            ("Новости команды", "novosti-komandy"),
            ("ab__cd", "ab__cd"),
            ("!!!", ""),
        ],
    )
    def test_examples(self, raw: str, expected: str) -> None:
        assert clean_up_urlable(raw) == expected

    @settings(max_examples=200, deadline=None)
    @given(raw=st.text())
    def test_idempotent_and_in_alphabet(self, raw: str) -> None:
        cleaned = clean_up_urlable(raw)

        assert SLUG_ALPHABET_RE.fullmatch(cleaned)
        assert clean_up_urlable(cleaned) == cleaned


class TestValidateForSubmit:
    def test_valid_slug(self):
        assert validate_for_submit("validslug") == ValidSlugSchema(url="validslug")

    @pytest.mark.parametrize(
        ("raw", "rules"),
        [
            ("a", [SlugRule.TOO_SHORT]),
            ("-abc", [SlugRule.MUST_START_WITH_LETTER_OR_NUMBER]),
            ("abc_", [SlugRule.MUST_END_WITH_LETTER_OR_NUMBER]),
            ("ab__cd", [SlugRule.NO_DOUBLE_UNDERSCORE]),
            ("ab cd", [SlugRule.INVALID_URL]),
            ("Upper", [SlugRule.INVALID_URL]),
            ("_", [SlugRule.TOO_SHORT, SlugRule.MUST_START_WITH_LETTER_OR_NUMBER]),
            (
                "_a__b-",
                [
                    SlugRule.MUST_START_WITH_LETTER_OR_NUMBER,
                    SlugRule.MUST_END_WITH_LETTER_OR_NUMBER,
                    SlugRule.NO_DOUBLE_UNDERSCORE,
                ],
            ),
            ("", [SlugRule.TOO_SHORT]),
        ],
    )
    def test_violations_in_check_order(self, raw: str, rules: list[SlugRule]) -> None:
        result = validate_for_submit(raw)

        assert isinstance(result, InvalidSlugSchema)
        assert result.rules == rules

    def test_violation_messages(self):
        result = validate_for_submit("_")

        assert result.messages == [
            "URL must be two or more characters.",
            "URL must start with a letter or number.",
        ]
        assert [v.message_id for v in result.violations] == [
            "change_url.longer",
            "change_url.startWithLetter",
        ]

    def test_fallback_only_when_no_rule_matches(self):
        assert get_url_violations("a--b") == [SlugRule.INVALID_URL]
        assert get_url_violations("a") == [SlugRule.TOO_SHORT]

    @settings(max_examples=200, deadline=None)
    @given(raw=st.from_regex(r"[a-z0-9][a-z0-9_-]{0,30}[a-z0-9]", fullmatch=True))
    def test_canonical_slug_is_accepted(self, raw: str) -> None:
        assume(clean_up_urlable(raw) == raw)
        assume("__" not in raw)

        assert validate_for_submit(raw) == ValidSlugSchema(url=raw)

    @settings(max_examples=200, deadline=None)
    @given(raw=st.text(max_size=20))
    def test_rejection_is_never_empty(self, raw: str) -> None:
        result = validate_for_submit(raw)

        if isinstance(result, InvalidSlugSchema):
            assert result.violations
        else:
            assert result.url == raw


class TestGetShortenedUrl:
    def test_short_url_gets_trailing_slash(self):
        assert get_shortened_url("https://chat.io/team") == "https://chat.io/team/"

    def test_empty_url(self):
        assert get_shortened_url() == "/"

    def test_boundary_length_not_shortened(self):
        url = "x" * 35
        assert get_shortened_url(url) == url + "/"

    def test_long_url_is_shortened(self):
        url = "https://chat.example.com/my-team/channels"
        assert get_shortened_url(url) == "https://ch...team/channels/"

    def test_custom_length(self):
        url = "https://chat.example.com/my-team/channels"
        assert get_shortened_url(url, get_length=20) == "https://ch...annels/"
