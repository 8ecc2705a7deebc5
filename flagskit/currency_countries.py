"""
Currency code to country mapping.

A currency is often used by more than one country. Each currency maps to a
single representative country: the issuer where there is one, the largest
member for shared regional currencies, and 'EU' for the euro.
"""

import logging
from typing import Optional

from flagskit import country_names

logger = logging.getLogger(__name__)

# ISO 4217 currency code -> ISO 3166-1 alpha-2 country code
CURRENCY_COUNTRY_MAP = {
    'AED': 'AE', 'AFN': 'AF', 'ALL': 'AL', 'AMD': 'AM', 'ANG': 'CW',
    'AOA': 'AO', 'ARS': 'AR', 'AUD': 'AU', 'AWG': 'AW', 'AZN': 'AZ',
    'BAM': 'BA', 'BBD': 'BB', 'BDT': 'BD', 'BGN': 'BG', 'BHD': 'BH',
    'BIF': 'BI', 'BMD': 'BM', 'BND': 'BN', 'BOB': 'BO', 'BRL': 'BR',
    'BSD': 'BS', 'BTN': 'BT', 'BWP': 'BW', 'BYN': 'BY', 'BZD': 'BZ',
    'CAD': 'CA', 'CDF': 'CD', 'CHF': 'CH', 'CLP': 'CL', 'CNY': 'CN',
    'COP': 'CO', 'CRC': 'CR', 'CUP': 'CU', 'CVE': 'CV', 'CZK': 'CZ',
    'DJF': 'DJ', 'DKK': 'DK', 'DOP': 'DO', 'DZD': 'DZ', 'EGP': 'EG',
    'ERN': 'ER', 'ETB': 'ET', 'EUR': 'EU', 'FJD': 'FJ', 'FKP': 'FK',
    'GBP': 'GB', 'GEL': 'GE', 'GHS': 'GH', 'GIP': 'GI', 'GMD': 'GM',
    'GNF': 'GN', 'GTQ': 'GT', 'GYD': 'GY', 'HKD': 'HK', 'HNL': 'HN',
    'HTG': 'HT', 'HUF': 'HU', 'IDR': 'ID', 'ILS': 'IL', 'INR': 'IN',
    'IQD': 'IQ', 'IRR': 'IR', 'ISK': 'IS', 'JMD': 'JM', 'JOD': 'JO',
    'JPY': 'JP', 'KES': 'KE', 'KGS': 'KG', 'KHR': 'KH', 'KMF': 'KM',
    'KPW': 'KP', 'KRW': 'KR', 'KWD': 'KW', 'KYD': 'KY', 'KZT': 'KZ',
    'LAK': 'LA', 'LBP': 'LB', 'LKR': 'LK', 'LRD': 'LR', 'LSL': 'LS',
    'LYD': 'LY', 'MAD': 'MA', 'MDL': 'MD', 'MGA': 'MG', 'MKD': 'MK',
    'MMK': 'MM', 'MNT': 'MN', 'MOP': 'MO', 'MRU': 'MR', 'MUR': 'MU',
    'MVR': 'MV', 'MWK': 'MW', 'MXN': 'MX', 'MYR': 'MY', 'MZN': 'MZ',
    'NAD': 'NA', 'NGN': 'NG', 'NIO': 'NI', 'NOK': 'NO', 'NPR': 'NP',
    'NZD': 'NZ', 'OMR': 'OM', 'PAB': 'PA', 'PEN': 'PE', 'PGK': 'PG',
    'PHP': 'PH', 'PKR': 'PK', 'PLN': 'PL', 'PYG': 'PY', 'QAR': 'QA',
    'RON': 'RO', 'RSD': 'RS', 'RUB': 'RU', 'RWF': 'RW', 'SAR': 'SA',
    'SBD': 'SB', 'SCR': 'SC', 'SDG': 'SD', 'SEK': 'SE', 'SGD': 'SG',
    'SHP': 'SH', 'SLE': 'SL', 'SOS': 'SO', 'SRD': 'SR', 'SSP': 'SS',
    'STN': 'ST', 'SYP': 'SY', 'SZL': 'SZ', 'THB': 'TH', 'TJS': 'TJ',
    'TMT': 'TM', 'TND': 'TN', 'TOP': 'TO', 'TRY': 'TR', 'TTD': 'TT',
    'TWD': 'TW', 'TZS': 'TZ', 'UAH': 'UA', 'UGX': 'UG', 'USD': 'US',
    'UYU': 'UY', 'UZS': 'UZ', 'VES': 'VE', 'VND': 'VN', 'VUV': 'VU',
    'WST': 'WS', 'XAF': 'CM', 'XCD': 'AG', 'XOF': 'SN', 'XPF': 'PF',
    'YER': 'YE', 'ZAR': 'ZA', 'ZMW': 'ZM', 'ZWL': 'ZW',
}


def country_code_from_currency_code(code: Optional[str]) -> Optional[str]:
    """
    Get the representative country code for a currency.
    
    Args:
        code: ISO 4217 currency code (e.g., 'USD'); case is ignored
        
    Returns:
        Two-letter country code, or None if the currency is unknown
    """
    if not isinstance(code, str):
        return None
    country_code = CURRENCY_COUNTRY_MAP.get(code.strip().upper())
    if country_code is None:
        logger.debug(f"Unknown currency code {code!r}")
    return country_code


def get_country_for_currency(currency: Optional[str]) -> str:
    """
    Get the country name for a currency code.
    
    Args:
        currency: Currency code (e.g., 'EUR', 'GBP')
        
    Returns:
        Country name, the currency code itself if not found, or "" if it
        is not a string
    """
    country_code = country_code_from_currency_code(currency)
    if country_code is None:
        return currency if isinstance(currency, str) else ""
    return country_names.get_country_name(country_code)
