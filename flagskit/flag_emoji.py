"""
Emoji flags built from Unicode Regional Indicator Symbols.

Unresolved codes never raise; they render as the white flag so callers can
always show something.
"""

import logging
from typing import Optional

from flagskit import config
from flagskit import currency_countries
from flagskit import phone_codes

logger = logging.getLogger(__name__)

VARIATION_SELECTOR_16 = "\uFE0F"


def _is_country_code(code: str) -> bool:
    return len(code) == 2 and all('A' <= letter <= 'Z' for letter in code)


def flag_emoji_for_country_code(code: Optional[str]) -> str:
    """
    Build the emoji flag for a two-letter country code.
    
    Each letter is shifted into the Regional Indicator block (A -> U+1F1E6),
    and the pair renders as a flag on platforms that support it.
    
    Args:
        code: ISO 3166-1 alpha-2 code, any case (e.g., 'US', 'cz')
        
    Returns:
        Flag emoji, or config.WHITE_FLAG when the code is not two letters
    """
    if not isinstance(code, str):
        return config.WHITE_FLAG
    normalized = code.upper()
    if len(code) != 2 or not code.isascii() or not _is_country_code(normalized):
        if code:
            logger.debug(f"Not a country code: {code!r}, using white flag")
        return config.WHITE_FLAG
    return ''.join(chr(config.REGIONAL_INDICATOR_A + ord(letter) - ord('A')) for letter in normalized)


def flag_emoji_for_currency_code(code: Optional[str]) -> str:
    """Emoji flag of the representative country of a currency (white flag if unknown)."""
    country_code = currency_countries.country_code_from_currency_code(code)
    return flag_emoji_for_country_code(country_code or "")


def flag_emoji_for_phone_code(code: Optional[str]) -> str:
    """Emoji flag of the country owning a calling code (white flag if unknown)."""
    country_code = phone_codes.country_code_from_phone_code(code)
    return flag_emoji_for_country_code(country_code or "")


def country_code_from_flag_emoji(emoji: Optional[str]) -> Optional[str]:
    """
    Reverse of flag_emoji_for_country_code.
    
    Args:
        emoji: Flag emoji such as '🇺🇸'; a trailing U+FE0F is ignored
        
    Returns:
        Two-letter country code, or None for the white flag and anything
        that is not a pair of Regional Indicator Symbols
    """
    if not isinstance(emoji, str):
        return None
    emoji = emoji.strip()
    if emoji.endswith(VARIATION_SELECTOR_16):
        emoji = emoji[:-1]
    if len(emoji) != 2:
        return None
    codepoints = [ord(symbol) for symbol in emoji]
    if not all(config.REGIONAL_INDICATOR_A <= cp <= config.REGIONAL_INDICATOR_Z for cp in codepoints):
        return None
    return ''.join(chr(ord('A') + cp - config.REGIONAL_INDICATOR_A) for cp in codepoints)
