"""
Persian (Jalali) calendar conversion, arithmetic and formatting, with Django
integration (model field, template filters, management command).
"""
from .calendar_services.jalali_calendar import is_leap_year, month_length, to_gregorian, to_persian
from .context import CalendarContext
from .dates import PersianDate
from .exceptions import ConversionError, ParseError, PersianDateError, ValidationError

__version__ = '1.0.0'

__all__ = [
    'CalendarContext',
    'ConversionError',
    'ParseError',
    'PersianDate',
    'PersianDateError',
    'ValidationError',
    'is_leap_year',
    'month_length',
    'to_gregorian',
    'to_persian',
]
