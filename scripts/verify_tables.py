#!/usr/bin/env python3
"""
Script to verify the static lookup tables
"""

import logging
import os
import sys

# Add parent directory to path to import flagskit without installing it
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))
from flagskit import config
from flagskit import consistency
from flagskit import country_names
from flagskit import currency_countries
from flagskit import flag_emoji
from flagskit import phone_codes

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

print("Lookup tables:")
print("-" * 50)
print(f"  • Countries: {len(country_names.COUNTRY_NAMES)}")
print(f"  • Phone codes: {len(phone_codes.PHONE_CODE_COUNTRY_MAP)}")
print(f"  • Currencies: {len(currency_countries.CURRENCY_COUNTRY_MAP)}")

print("\n" + "-" * 50)
print("\nSample lookups:")
for phone_code in ['+1', '+44', '+420']:
    country = phone_codes.country_code_from_phone_code(phone_code)
    print(f"  {phone_code:>6} -> {country} {flag_emoji.flag_emoji_for_phone_code(phone_code)}")
for currency in ['USD', 'EUR', 'JPY']:
    print(f"  {currency:>6} -> {currency_countries.get_country_for_currency(currency)} "
          f"{flag_emoji.flag_emoji_for_currency_code(currency)}")

print("\n" + "=" * 50)
print("Checking table consistency...")
problems = consistency.find_table_problems()
if not problems:
    print("  ✓ All tables consistent")
    sys.exit(0)

for problem in problems:
    print(f"  ✗ {problem}")
sys.exit(1)
