"""
Utility functions for the persian_date app.
Includes normalization utilities for Persian/Arabic numerals and letters.
"""
import logging

logger = logging.getLogger(__name__)

# Persian/Arabic to English numeral mapping
PERSIAN_TO_ENGLISH = {
    '۰': '0', '۱': '1', '۲': '2', '۳': '3', '۴': '4',
    '۵': '5', '۶': '6', '۷': '7', '۸': '8', '۹': '9',
    # Arabic-Indic numerals (alternative forms)
    '٠': '0', '١': '1', '٢': '2', '٣': '3', '٤': '4',
    '٥': '5', '٦': '6', '٧': '7', '٨': '8', '٩': '9',
}

# Reverse mapping for English to Persian (for display)
ENGLISH_TO_PERSIAN = {v: k for k, v in PERSIAN_TO_ENGLISH.items() if '۰' <= k <= '۹'}

# Arabic letter forms that commonly show up in typed Persian text
ARABIC_TO_PERSIAN_LETTERS = {
    'ي': 'ی',
    'ى': 'ی',
    'ك': 'ک',
}


def normalize_digits(value):
    """
    Convert Persian/Arabic numerals in a string to English numerals.

    Example:
        normalize_digits('۱۴۰۳/۰۱/۰۱') -> '1403/01/01'
    """
    if value is None:
        return ''
    return ''.join(PERSIAN_TO_ENGLISH.get(char, char) for char in str(value))


def normalize_persian_text(value):
    """
    Normalize digits and Arabic letter forms so that user input matches the
    month and weekday name tables.

    Example:
        normalize_persian_text('٢٥ دي') -> '25 دی'
    """
    normalized = ''.join(ARABIC_TO_PERSIAN_LETTERS.get(char, char) for char in normalize_digits(value))
    if value and str(value) != normalized:
        logger.debug("Persian text normalized: %r -> %r", value, normalized)
    return normalized


def to_persian_digits(value):
    """
    Convert Latin digits to Persian digits in a string.
    Preserves non-digit characters.

    Example:
        to_persian_digits('1403/01/01') -> '۱۴۰۳/۰۱/۰۱'
    """
    if value is None:
        return ''
    return ''.join(ENGLISH_TO_PERSIAN.get(char, char) for char in str(value))
