"""
Calendar services module for the persian_date app

This module provides Jalali calendar conversion and formatting.
"""
from .jalali_calendar import (
    JalaliCalendarService,
    MAX_YEAR,
    MIN_YEAR,
    day_of_year,
    is_leap_year,
    month_length,
    to_gregorian,
    to_persian,
)
from .formatting import (
    MONTH_NAMES,
    WEEKDAY_NAMES,
    format_date,
    format_gregorian,
    parse_date,
)

__all__ = [
    'JalaliCalendarService',
    'MAX_YEAR',
    'MIN_YEAR',
    'MONTH_NAMES',
    'WEEKDAY_NAMES',
    'day_of_year',
    'format_date',
    'format_gregorian',
    'is_leap_year',
    'month_length',
    'parse_date',
    'to_gregorian',
    'to_persian',
]
