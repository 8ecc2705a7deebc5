import string

import pytest

from flagskit import config
from flagskit.flag_emoji import (
    country_code_from_flag_emoji,
    flag_emoji_for_country_code,
    flag_emoji_for_currency_code,
    flag_emoji_for_phone_code,
)

US_FLAG = "\U0001F1FA\U0001F1F8"
CZ_FLAG = "\U0001F1E8\U0001F1FF"


def test_white_flag_is_the_flag_glyph_with_variation_selector():
    assert config.WHITE_FLAG == "🏳️"
    assert [ord(c) for c in config.WHITE_FLAG] == [0x1F3F3, 0xFE0F]


def test_flag_for_country_code():
    assert flag_emoji_for_country_code("US") == US_FLAG
    assert flag_emoji_for_country_code("US") == "🇺🇸"


def test_flag_for_country_code_ignores_case():
    assert flag_emoji_for_country_code("us") == flag_emoji_for_country_code("US")
    assert flag_emoji_for_country_code("cZ") == CZ_FLAG


def test_flag_for_every_letter_pair_is_two_regional_indicators():
    for first in string.ascii_uppercase:
        for second in string.ascii_uppercase:
            flag = flag_emoji_for_country_code(first + second)
            assert len(flag) == 2
            assert ord(flag[0]) == 0x1F1E6 + ord(first) - ord('A')
            assert ord(flag[1]) == 0x1F1E6 + ord(second) - ord('A')


@pytest.mark.parametrize("code", ["", "U", "USA", "U1", "12", "  ", "ß", "ıs", "\u0131S", None])
def test_flag_for_invalid_country_code_is_white_flag(code):
    assert flag_emoji_for_country_code(code) == config.WHITE_FLAG


def test_flag_for_currency_code():
    assert flag_emoji_for_currency_code("USD") == "🇺🇸"
    assert flag_emoji_for_currency_code("usd") == "🇺🇸"
    assert flag_emoji_for_currency_code("EUR") == "🇪🇺"


@pytest.mark.parametrize("code", ["", "XXX", "US", None])
def test_flag_for_unknown_currency_code_is_white_flag(code):
    assert flag_emoji_for_currency_code(code) == config.WHITE_FLAG


@pytest.mark.parametrize("code", ["+420", "420"])
def test_flag_for_phone_code(code):
    assert flag_emoji_for_phone_code(code) == "🇨🇿"


@pytest.mark.parametrize("code", ["", "+", "+0", "abc", None])
def test_flag_for_unknown_phone_code_is_white_flag(code):
    assert flag_emoji_for_phone_code(code) == config.WHITE_FLAG


def test_lookups_are_repeatable():
    first = [flag_emoji_for_country_code("FR"), flag_emoji_for_phone_code("+44"), flag_emoji_for_currency_code("JPY")]
    flag_emoji_for_country_code("")
    flag_emoji_for_phone_code("nope")
    second = [flag_emoji_for_country_code("FR"), flag_emoji_for_phone_code("+44"), flag_emoji_for_currency_code("JPY")]
    assert first == second


def test_country_code_from_flag_emoji():
    assert country_code_from_flag_emoji("🇺🇸") == "US"
    assert country_code_from_flag_emoji(CZ_FLAG + "\uFE0F") == "CZ"
    assert country_code_from_flag_emoji(" 🇯🇵 ") == "JP"


def test_country_code_from_flag_emoji_inverts_flag_for_country_code():
    for code in ["AD", "GB", "ZW", "EU"]:
        assert country_code_from_flag_emoji(flag_emoji_for_country_code(code)) == code


@pytest.mark.parametrize("emoji", [config.WHITE_FLAG, "", "US", "🇺", "🇺🇸🇨🇿", None])
def test_country_code_from_non_flag_is_none(emoji):
    assert country_code_from_flag_emoji(emoji) is None
