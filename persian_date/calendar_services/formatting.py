"""
Format pattern language for Persian dates.

Tokens follow the PHP ``date()`` letters that Persian date libraries have
traditionally used, so 'Y-m-d H:i:s' renders as '1403-01-01 12:30:00'.
Any character that is not a token is copied as-is; a backslash escapes the
next character.

Formatting tokens:

    d  day, 2 digits            j  day, no padding
    D  weekday, one letter      l  weekday name
    N  weekday 1 (Sat)..7 (Fri) w  weekday 0 (Sat)..6 (Fri)
    z  day of year, from 0      W  week of year
    F  month name               m  month, 2 digits
    n  month, no padding        t  days in month
    L  1 for leap years, else 0
    Y  year, 4 digits           y  year, 2 digits
    a  ق.ظ / ب.ظ                 A  قبل از ظهر / بعد از ظهر
    g  hour 1..12               G  hour 0..23
    h  hour 01..12              H  hour 00..23
    i  minute, 2 digits         s  second, 2 digits
    U  Unix timestamp

Parsing accepts d j m n Y F l H G h g i s a A and literals.
"""
import logging
import re

from ..exceptions import ParseError
from ..utils import normalize_persian_text

logger = logging.getLogger(__name__)

MONTH_NAMES = (
    'فروردین',
    'اردیبهشت',
    'خرداد',
    'تیر',
    'مرداد',
    'شهریور',
    'مهر',
    'آبان',
    'آذر',
    'دی',
    'بهمن',
    'اسفند',
)

# Index 0 is Saturday, the first day of the Persian week.
WEEKDAY_NAMES = (
    'شنبه',
    'یکشنبه',
    'دوشنبه',
    'سه‌شنبه',
    'چهارشنبه',
    'پنج‌شنبه',
    'جمعه',
)

WEEKDAY_SHORT_NAMES = ('ش', 'ی', 'د', 'س', 'چ', 'پ', 'ج')

AM_SHORT, PM_SHORT = 'ق.ظ', 'ب.ظ'
AM_LONG, PM_LONG = 'قبل از ظهر', 'بعد از ظهر'


def _hour12(hour):
    return hour % 12 or 12


_FORMATTERS = {
    'd': lambda v: f"{v.day:02d}",
    'j': lambda v: str(v.day),
    'D': lambda v: WEEKDAY_SHORT_NAMES[v.day_of_week],
    'l': lambda v: WEEKDAY_NAMES[v.day_of_week],
    'N': lambda v: str(v.day_of_week + 1),
    'w': lambda v: str(v.day_of_week),
    'z': lambda v: str(v.day_of_year - 1),
    'W': lambda v: str(v.week_of_year),
    'F': lambda v: MONTH_NAMES[v.month - 1],
    'm': lambda v: f"{v.month:02d}",
    'n': lambda v: str(v.month),
    't': lambda v: str(v.month_days),
    'L': lambda v: '1' if v.is_leap_year() else '0',
    'Y': lambda v: f"{v.year:04d}",
    'y': lambda v: f"{v.year % 100:02d}",
    'a': lambda v: AM_SHORT if v.hour < 12 else PM_SHORT,
    'A': lambda v: AM_LONG if v.hour < 12 else PM_LONG,
    'g': lambda v: str(_hour12(v.hour)),
    'G': lambda v: str(v.hour),
    'h': lambda v: f"{_hour12(v.hour):02d}",
    'H': lambda v: f"{v.hour:02d}",
    'i': lambda v: f"{v.minute:02d}",
    's': lambda v: f"{v.second:02d}",
    'U': lambda v: str(v.unix()),
}

# Gregorian tokens used for storage formats such as 'Y-m-d H:i:s'
_GREGORIAN_FORMATTERS = {
    'd': lambda dt: f"{dt.day:02d}",
    'j': lambda dt: str(dt.day),
    'm': lambda dt: f"{dt.month:02d}",
    'n': lambda dt: str(dt.month),
    'Y': lambda dt: f"{dt.year:04d}",
    'y': lambda dt: f"{dt.year % 100:02d}",
    'H': lambda dt: f"{dt.hour:02d}",
    'G': lambda dt: str(dt.hour),
    'i': lambda dt: f"{dt.minute:02d}",
    's': lambda dt: f"{dt.second:02d}",
    'U': lambda dt: str(int(dt.timestamp())),
    'P': lambda dt: _utc_offset(dt),
}


def _utc_offset(dt):
    offset = dt.utcoffset()
    if offset is None:
        return ''
    minutes = int(offset.total_seconds()) // 60
    sign = '-' if minutes < 0 else '+'
    hours, minutes = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}:{minutes:02d}"


def _alternation(names):
    # Longest first so that 'یکشنبه' is not matched as 'شنبه'
    return '|'.join(re.escape(name) for name in sorted(names, key=len, reverse=True))


_PARSERS = {
    'd': ('day', r'\d{1,2}'),
    'j': ('day', r'\d{1,2}'),
    'm': ('month', r'\d{1,2}'),
    'n': ('month', r'\d{1,2}'),
    'Y': ('year', r'\d{4}'),
    'H': ('hour', r'\d{1,2}'),
    'G': ('hour', r'\d{1,2}'),
    'h': ('hour12', r'\d{1,2}'),
    'g': ('hour12', r'\d{1,2}'),
    'i': ('minute', r'\d{1,2}'),
    's': ('second', r'\d{1,2}'),
    'F': ('month_name', _alternation(MONTH_NAMES)),
    'l': ('weekday_name', _alternation(WEEKDAY_NAMES)),
    'a': ('meridiem', _alternation((AM_SHORT, PM_SHORT))),
    'A': ('meridiem', _alternation((AM_LONG, PM_LONG))),
}


def _tokens(pattern):
    """Yield (is_token, char) pairs, honouring backslash escapes."""
    escaped = False
    for char in pattern:
        if escaped:
            yield False, char
            escaped = False
        elif char == '\\':
            escaped = True
        else:
            yield True, char
    if escaped:
        yield False, '\\'


def format_date(value, pattern):
    """
    Render a PersianDate with ``pattern``.

    Args:
        value: a PersianDate (anything with its accessors works)
        pattern (str): format pattern, see the module docstring

    Returns:
        str: the formatted date
    """
    parts = []
    for is_token, char in _tokens(pattern):
        formatter = _FORMATTERS.get(char) if is_token else None
        parts.append(formatter(value) if formatter else char)
    return ''.join(parts)


def format_gregorian(value, pattern):
    """Render a Gregorian ``datetime`` with the PHP-style storage tokens."""
    parts = []
    for is_token, char in _tokens(pattern):
        formatter = _GREGORIAN_FORMATTERS.get(char) if is_token else None
        parts.append(formatter(value) if formatter else char)
    return ''.join(parts)


def _compile(pattern):
    regex = []
    fields = []
    for is_token, char in _tokens(pattern):
        if is_token and char in _PARSERS:
            field, expression = _PARSERS[char]
            regex.append(f"({expression})")
            fields.append(field)
        elif is_token and char in _FORMATTERS:
            raise ParseError(f"Token '{char}' cannot be used for parsing (pattern {pattern!r})")
        else:
            regex.append(re.escape(char))
    return re.compile(''.join(regex)), fields


def parse_date(pattern, value):
    """
    Parse a Persian date string against ``pattern``.

    Args:
        pattern (str): format pattern, e.g. 'Y-m-d' or 'j F Y'
        value (str): the string to parse; Persian and Arabic digits are accepted

    Returns:
        dict: the fields found, any of 'year', 'month', 'day', 'hour',
        'minute', 'second'

    Raises:
        ParseError: If the value does not match the pattern
    """
    regex, fields = _compile(pattern)
    text = normalize_persian_text(value).strip()
    match = regex.fullmatch(text)
    if match is None:
        logger.debug("Value %r does not match pattern %r", value, pattern)
        raise ParseError(f"{value!r} does not match the format {pattern!r}")

    result = {}
    hour12 = None
    meridiem = None
    for field, raw in zip(fields, match.groups()):
        if field == 'month_name':
            result['month'] = MONTH_NAMES.index(raw) + 1
        elif field == 'weekday_name':
            continue
        elif field == 'meridiem':
            meridiem = raw
        elif field == 'hour12':
            hour12 = int(raw)
        else:
            result[field] = int(raw)

    if hour12 is not None:
        if meridiem is None:
            result['hour'] = hour12
        else:
            is_pm = meridiem in (PM_SHORT, PM_LONG)
            result['hour'] = hour12 % 12 + (12 if is_pm else 0)
    elif meridiem is not None and 'hour' in result:
        if meridiem in (PM_SHORT, PM_LONG) and result['hour'] < 12:
            result['hour'] += 12
    return result
