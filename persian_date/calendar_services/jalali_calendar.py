"""
Jalali (Persian/Shamsi) Calendar Service

Stateless conversion between the proleptic Gregorian calendar and the Persian
calendar, plus the Persian calendar metadata (leap years, month lengths).

Both directions go through the proleptic Gregorian ordinal used by
``datetime.date.toordinal()``:

    Gregorian (y, m, d) <-> ordinal <-> Persian (y, m, d)

Leap years follow the 33-year arithmetic rule: a year is leap when
``year % 33`` is one of 1, 5, 9, 13, 17, 22, 26 or 30. The rule matches the
official Iranian calendar for the current era (1395, 1399, 1403 and 1408 are
leap years) and is applied uniformly over the supported range.
"""
import logging
from datetime import date

from ..exceptions import ConversionError

logger = logging.getLogger(__name__)

MIN_YEAR = 1000
MAX_YEAR = 3000

LEAP_REMAINDERS = frozenset({1, 5, 9, 13, 17, 22, 26, 30})
_SORTED_LEAP_REMAINDERS = sorted(LEAP_REMAINDERS)

CYCLE_YEARS = 33
CYCLE_DAYS = CYCLE_YEARS * 365 + len(LEAP_REMAINDERS)  # 12053

# Ordinal of 1 Farvardin, year 1 under the 33-year rule.
# Anchored on 1 Farvardin 1403 == 2024-03-20.
PERSIAN_EPOCH = 226895

# Days elapsed before the first day of months 1..12.
_DAYS_BEFORE_MONTH = (0, 31, 62, 93, 124, 155, 186, 216, 246, 276, 306, 336)


def is_leap_year(year):
    return year % CYCLE_YEARS in LEAP_REMAINDERS


def month_length(year, month):
    if month <= 6:
        return 31
    if month <= 11:
        return 30
    return 30 if is_leap_year(year) else 29


def year_length(year):
    return 366 if is_leap_year(year) else 365


def days_before_year(year):
    """Number of days from 1 Farvardin of year 1 to 1 Farvardin of ``year``."""
    elapsed = year - 1
    cycles, remainder = divmod(elapsed, CYCLE_YEARS)
    leaps = cycles * len(LEAP_REMAINDERS)
    leaps += sum(1 for r in _SORTED_LEAP_REMAINDERS if r <= remainder)
    return elapsed * 365 + leaps


def day_of_year(month, day):
    """1-based position of (month, day) inside its Persian year."""
    return _DAYS_BEFORE_MONTH[month - 1] + day


def _check_year(year):
    if not MIN_YEAR <= year <= MAX_YEAR:
        logger.debug("Persian year %s is outside %s..%s", year, MIN_YEAR, MAX_YEAR)
        raise ConversionError(f"Persian year {year} is outside the supported range {MIN_YEAR}-{MAX_YEAR}")


def persian_to_ordinal(year, month, day):
    """
    Convert a Persian date to a proleptic Gregorian ordinal.

    Raises:
        ConversionError: If the year is outside 1000-3000 or the month/day do
            not exist in that year.
    """
    _check_year(year)
    if not 1 <= month <= 12:
        raise ConversionError(f"Invalid Persian month: {year}/{month}/{day}")
    if not 1 <= day <= month_length(year, month):
        raise ConversionError(f"Invalid Persian day: {year}/{month}/{day}")
    return PERSIAN_EPOCH + days_before_year(year) + day_of_year(month, day) - 1


def ordinal_to_persian(ordinal):
    """
    Convert a proleptic Gregorian ordinal to a Persian (year, month, day).

    The year is estimated from the mean cycle length and then corrected
    against ``days_before_year``.
    """
    offset = ordinal - PERSIAN_EPOCH
    year = offset * CYCLE_YEARS // CYCLE_DAYS + 1
    while days_before_year(year + 1) <= offset:
        year += 1
    while days_before_year(year) > offset:
        year -= 1
    _check_year(year)

    remaining = offset - days_before_year(year)
    if not 0 <= remaining < year_length(year):
        raise ConversionError(f"Inconsistent day count {remaining} for Persian year {year}")

    if remaining < 186:
        month, day = divmod(remaining, 31)
        return year, month + 1, day + 1
    month, day = divmod(remaining - 186, 30)
    return year, month + 7, day + 1


def to_persian(g_year, g_month, g_day):
    """
    Convert a Gregorian date to a Persian date.

    Args:
        g_year (int): Gregorian year (e.g., 2024)
        g_month (int): Gregorian month (1-12)
        g_day (int): Gregorian day (1-31)

    Returns:
        tuple: (year, month, day) in the Persian calendar

    Raises:
        ConversionError: If the Gregorian date is invalid or falls outside
            Persian years 1000-3000.
    """
    try:
        ordinal = date(g_year, g_month, g_day).toordinal()
    except (TypeError, ValueError) as e:
        raise ConversionError(f"Invalid Gregorian date: {g_year}-{g_month}-{g_day}") from e
    return ordinal_to_persian(ordinal)


def to_gregorian(p_year, p_month, p_day):
    """
    Convert a Persian date to a Gregorian date.

    Args:
        p_year (int): Persian year (e.g., 1403)
        p_month (int): Persian month (1-12)
        p_day (int): Persian day (1-31)

    Returns:
        tuple: (year, month, day) in the Gregorian calendar

    Raises:
        ConversionError: If the Persian date is invalid or outside 1000-3000.
    """
    gregorian = date.fromordinal(persian_to_ordinal(p_year, p_month, p_day))
    return gregorian.year, gregorian.month, gregorian.day


class JalaliCalendarService:
    """
    Jalali calendar service.

    Groups the conversion functions of this module behind one name for code
    that prefers a service object over module functions.
    """

    @staticmethod
    def is_leap_year(year):
        return is_leap_year(year)

    @staticmethod
    def month_length(year, month):
        return month_length(year, month)

    @staticmethod
    def gregorian_to_jalali(dt):
        """
        Convert a Gregorian date or datetime to Jalali date components.

        Args:
            dt (date | datetime): Gregorian value; only the calendar date is used

        Returns:
            dict: Dictionary with keys 'year', 'month', 'day'
        """
        year, month, day = to_persian(dt.year, dt.month, dt.day)
        return {'year': year, 'month': month, 'day': day}

    @staticmethod
    def jalali_to_gregorian(year, month, day):
        """
        Convert a Jalali date to a Gregorian ``date``.

        Raises:
            ConversionError: If the Jalali date is invalid
        """
        return date(*to_gregorian(year, month, day))

    @staticmethod
    def validate_jalali_date(year, month, day):
        """
        Validate if a Jalali date is valid.

        Returns:
            bool: True if valid, False otherwise
        """
        try:
            persian_to_ordinal(year, month, day)
            return True
        except ConversionError:
            return False
