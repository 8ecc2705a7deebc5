import pytest

import flagskit
from flagskit.currency_countries import country_code_from_currency_code, get_country_for_currency
from flagskit.phone_codes import country_code_from_phone_code, normalize_phone_code


def test_country_code_from_phone_code_with_plus_symbol():
    assert country_code_from_phone_code("+420") == "CZ"


def test_country_code_from_phone_code_without_plus_symbol():
    assert country_code_from_phone_code("420") == "CZ"


@pytest.mark.parametrize("code, expected", [
    ("1", "US"),
    ("+7", "RU"),
    ("44", "GB"),
    ("+61", "AU"),
    (" +49 ", "DE"),
    ("383", "XK"),
])
def test_country_code_from_shared_and_common_phone_codes(code, expected):
    assert country_code_from_phone_code(code) == expected


@pytest.mark.parametrize("code", ["", "+", "++420", "0", "4200", "CZ", None])
def test_country_code_from_unknown_phone_code_is_none(code):
    assert country_code_from_phone_code(code) is None


def test_normalize_phone_code_strips_one_plus():
    assert normalize_phone_code("+420") == "420"
    assert normalize_phone_code("++420") == "+420"


def test_country_code_from_currency_code():
    assert country_code_from_currency_code("USD") == "US"
    assert country_code_from_currency_code("usd") == "US"
    assert country_code_from_currency_code("EUR") == "EU"
    assert country_code_from_currency_code("XOF") == "SN"


@pytest.mark.parametrize("code", ["", "US", "DOLLAR", "XYZ", None])
def test_country_code_from_unknown_currency_code_is_none(code):
    assert country_code_from_currency_code(code) is None


def test_get_country_for_currency():
    assert get_country_for_currency("GBP") == "United Kingdom"
    assert get_country_for_currency("EUR") == "European Union"
    assert get_country_for_currency("XYZ") == "XYZ"


def test_get_country_name():
    assert flagskit.get_country_name("cz") == "Czech Republic"
    assert flagskit.get_country_name("QQ") == "QQ"


def test_country_names_for_non_string_are_empty():
    assert flagskit.get_country_name(None) == ""
    assert flagskit.get_country_for_currency(None) == ""


def test_package_exports_resolver_functions():
    assert flagskit.country_code_from_phone_code("+420") == "CZ"
    assert flagskit.country_code_from_currency_code("USD") == "US"
    assert flagskit.flag_emoji_for_country_code("") == flagskit.WHITE_FLAG
    assert flagskit.flag_emoji_for_currency_code("") == flagskit.WHITE_FLAG
    assert flagskit.flag_emoji_for_phone_code("") == flagskit.WHITE_FLAG
