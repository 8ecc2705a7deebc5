"""
Country, currency and phone code lookups with emoji and image flags.
"""

from flagskit.config import WHITE_FLAG
from flagskit.country_names import get_country_name
from flagskit.currency_countries import country_code_from_currency_code, get_country_for_currency
from flagskit.flag_emoji import (
    country_code_from_flag_emoji,
    flag_emoji_for_country_code,
    flag_emoji_for_currency_code,
    flag_emoji_for_phone_code,
)
from flagskit.flag_images import ContentMode, FlagStyle, StyleKind, image_data, image_path
from flagskit.phone_codes import country_code_from_phone_code

__all__ = [
    'WHITE_FLAG',
    'ContentMode',
    'FlagStyle',
    'StyleKind',
    'country_code_from_currency_code',
    'country_code_from_flag_emoji',
    'country_code_from_phone_code',
    'flag_emoji_for_country_code',
    'flag_emoji_for_currency_code',
    'flag_emoji_for_phone_code',
    'get_country_for_currency',
    'get_country_name',
    'image_data',
    'image_path',
]
