"""
Sanity checks for the static lookup tables.
"""

import logging
import re
from typing import List

from flagskit import country_names
from flagskit import currency_countries
from flagskit import phone_codes

logger = logging.getLogger(__name__)

COUNTRY_CODE_PATTERN = re.compile(r"[A-Z]{2}")
CURRENCY_CODE_PATTERN = re.compile(r"[A-Z]{3}")
PHONE_CODE_PATTERN = re.compile(r"[0-9]{1,4}")


def _check_country(country_code: str, source: str) -> List[str]:
    if not COUNTRY_CODE_PATTERN.fullmatch(country_code):
        return [f"{source} maps to invalid country code {country_code!r}"]
    if country_code not in country_names.COUNTRY_NAMES:
        return [f"{source} maps to {country_code}, which has no country name"]
    return []


def find_table_problems() -> List[str]:
    """
    Check that the phone and currency tables agree with the country table.
    
    Returns:
        List of problem descriptions (empty if everything is consistent)
    """
    problems = []
    
    for code, country_code in phone_codes.PHONE_CODE_COUNTRY_MAP.items():
        if not PHONE_CODE_PATTERN.fullmatch(code):
            problems.append(f"Phone code {code!r} is not 1-4 digits")
        problems.extend(_check_country(country_code, f"Phone code +{code}"))
    
    for code, country_code in currency_countries.CURRENCY_COUNTRY_MAP.items():
        if not CURRENCY_CODE_PATTERN.fullmatch(code):
            problems.append(f"Currency code {code!r} is not three uppercase letters")
        problems.extend(_check_country(country_code, f"Currency {code}"))
    
    for country_code in country_names.COUNTRY_NAMES:
        if not COUNTRY_CODE_PATTERN.fullmatch(country_code):
            problems.append(f"Country table has invalid code {country_code!r}")
    
    if problems:
        logger.warning(f"Found {len(problems)} problems in lookup tables")
    return problems
