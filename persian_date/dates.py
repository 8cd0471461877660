"""
PersianDate: an immutable Persian (Jalali) date-time value.

Calendar-specific stepping (months, years) works on the Persian fields
directly. Everything else (days, weeks, hours, comparisons, weekdays) goes
through the Gregorian ``datetime`` returned by ``to_gregorian_instant()`` and
is converted back.
"""
import logging
import math
import re
from dataclasses import dataclass, replace
from datetime import date, datetime, timedelta, timezone as dt_timezone, tzinfo
from typing import Optional

from django.utils import dateparse
from django.utils import timezone as dj_timezone

from . import humanize
from .calendar_services.formatting import MONTH_NAMES, WEEKDAY_NAMES, format_date, parse_date
from .calendar_services.jalali_calendar import (
    day_of_year,
    is_leap_year,
    month_length,
    ordinal_to_persian,
    persian_to_ordinal,
    to_gregorian,
    to_persian,
)
from .context import get_default_context, resolve_timezone
from .exceptions import ParseError
from .utils import normalize_digits
from .validators import validate_persian_date

logger = logging.getLogger(__name__)

_NUMERIC_RE = re.compile(r'^-?\d+(\.\d+)?$')


def _check_count(name, value):
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"{name} must be an integer >= 1, got {value!r}")


def as_instant(value):
    """Normalize a PersianDate, datetime or date to a Gregorian datetime."""
    if isinstance(value, PersianDate):
        return value.to_gregorian_instant()
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    raise TypeError(f"Cannot compare PersianDate with {type(value).__name__}")


def as_aware_instant(value, context=None):
    """as_instant(), with a naive result read in the context's default zone."""
    instant = as_instant(value)
    if dj_timezone.is_naive(instant):
        instant = (context or get_default_context()).localize(instant)
    return instant


@dataclass(frozen=True, eq=False)
class PersianDate:
    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    timezone: Optional[tzinfo] = None

    def __post_init__(self):
        validate_persian_date(self.year, self.month, self.day, self.hour, self.minute, self.second)
        object.__setattr__(self, 'timezone', resolve_timezone(self.timezone))
        if self.hour == 24:
            # Stored as 00:00 of the next day
            year, month, day = ordinal_to_persian(persian_to_ordinal(self.year, self.month, self.day) + 1)
            object.__setattr__(self, 'year', year)
            object.__setattr__(self, 'month', month)
            object.__setattr__(self, 'day', day)
            object.__setattr__(self, 'hour', 0)

    # ------------------------------
    # Construction
    # ------------------------------

    @classmethod
    def now(cls, timezone=None, context=None):
        context = context or get_default_context()
        return cls.from_datetime(context.now(timezone))

    @classmethod
    def from_gregorian(cls, g_year, g_month, g_day, hour=0, minute=0, second=0, timezone=None):
        year, month, day = to_persian(g_year, g_month, g_day)
        return cls(year, month, day, hour, minute, second, timezone)

    @classmethod
    def from_datetime(cls, value, timezone=None):
        """
        Create an instance from a Gregorian ``datetime`` or ``date``.

        With ``timezone`` given, an aware datetime is converted into that zone
        and a naive one is interpreted in it.
        """
        zone = resolve_timezone(timezone)
        if isinstance(value, datetime):
            if zone is not None:
                if dj_timezone.is_aware(value):
                    value = value.astimezone(zone)
                else:
                    value = dj_timezone.make_aware(value, zone)
            return cls.from_gregorian(
                value.year, value.month, value.day,
                value.hour, value.minute, value.second,
                value.tzinfo,
            )
        if isinstance(value, date):
            return cls.from_gregorian(value.year, value.month, value.day, timezone=zone)
        raise TypeError(f"Expected a date or datetime, got {type(value).__name__}")

    @classmethod
    def from_timestamp(cls, seconds, timezone=None, context=None):
        context = context or get_default_context()
        zone = resolve_timezone(timezone) if timezone is not None else context.timezone
        return cls.from_datetime(datetime.fromtimestamp(seconds, zone))

    @classmethod
    def from_format(cls, format, value, timezone=None, context=None):
        """
        Parse a Persian date string, e.g. ``from_format('Y-m-d', '1403-01-01')``.

        Missing time fields default to zero, missing date fields to today's.
        """
        fields = parse_date(format, value)
        if not {'year', 'month', 'day'} <= fields.keys():
            today = cls.now(timezone, context)
            fields.setdefault('year', today.year)
            fields.setdefault('month', today.month)
            fields.setdefault('day', today.day)
        return cls(
            fields['year'], fields['month'], fields['day'],
            fields.get('hour', 0), fields.get('minute', 0), fields.get('second', 0),
            timezone,
        )

    @classmethod
    def forge(cls, value=None, timezone=None, context=None):
        """
        Create an instance from whatever a caller has at hand.

        Accepts None (now), a PersianDate, a date/datetime, a Unix timestamp
        (number or digit string) or an ISO-8601 string.
        """
        if value is None or value == '':
            return cls.now(timezone, context)
        if isinstance(value, PersianDate):
            return value
        if isinstance(value, (datetime, date)):
            return cls.from_datetime(value, timezone)
        if isinstance(value, bool):
            raise TypeError("Cannot create a PersianDate from a bool")
        if isinstance(value, (int, float)):
            return cls.from_timestamp(value, timezone, context)
        if isinstance(value, str):
            text = normalize_digits(value).strip()
            if _NUMERIC_RE.match(text):
                return cls.from_timestamp(float(text), timezone, context)
            try:
                parsed = dateparse.parse_datetime(text) or dateparse.parse_date(text)
            except ValueError as e:
                raise ParseError(f"Invalid date string: {value!r}") from e
            if parsed is None:
                raise ParseError(f"Unrecognized date string: {value!r}")
            return cls.from_datetime(parsed, timezone)
        raise TypeError(f"Cannot create a PersianDate from {type(value).__name__}")

    # ------------------------------
    # Gregorian side
    # ------------------------------

    def to_gregorian_instant(self):
        g_year, g_month, g_day = to_gregorian(self.year, self.month, self.day)
        return datetime(g_year, g_month, g_day, self.hour, self.minute, self.second, tzinfo=self.timezone)

    to_datetime = to_gregorian_instant

    def to_date(self):
        """The Gregorian calendar date of the Persian date fields."""
        return date(*to_gregorian(self.year, self.month, self.day))

    def timestamp(self, context=None):
        return as_aware_instant(self, context).timestamp()

    def unix(self, context=None):
        return int(self.timestamp(context))

    # ------------------------------
    # Accessors
    # ------------------------------

    def is_leap_year(self):
        return is_leap_year(self.year)

    @property
    def month_days(self):
        return month_length(self.year, self.month)

    def days_of(self, month=1):
        """Number of days of ``month`` in this date's year."""
        if not 1 <= month <= 12:
            raise ValueError(f"month must be between 1 and 12, got {month}")
        return month_length(self.year, month)

    @property
    def month_name(self):
        return MONTH_NAMES[self.month - 1]

    @property
    def day_of_week(self):
        """0 for Saturday through 6 for Friday."""
        return (self.to_date().weekday() + 2) % 7

    @property
    def weekday_name(self):
        return WEEKDAY_NAMES[self.day_of_week]

    @property
    def day_of_year(self):
        return day_of_year(self.month, self.day)

    @property
    def week_of_month(self):
        return math.ceil((self.day_of_week + self.day) / 7)

    @property
    def week_of_year(self):
        return math.ceil(self.day_of_year / 7)

    def is_day_of_week(self, day_of_week):
        return self.day_of_week == day_of_week

    def is_saturday(self):
        return self.is_day_of_week(0)

    def is_sunday(self):
        return self.is_day_of_week(1)

    def is_monday(self):
        return self.is_day_of_week(2)

    def is_tuesday(self):
        return self.is_day_of_week(3)

    def is_wednesday(self):
        return self.is_day_of_week(4)

    def is_thursday(self):
        return self.is_day_of_week(5)

    def is_friday(self):
        return self.is_day_of_week(6)

    # ------------------------------
    # Month/year arithmetic
    # ------------------------------

    def add_months(self, months=1):
        _check_count('months', months)
        years, months = divmod(months, 12)
        result = self.add_years(years) if years else self
        for _ in range(months):
            next_month = result.month % 12 + 1
            next_year = result.year + 1 if next_month == 1 else result.year
            target_day = min(result.day, month_length(next_year, next_month))
            result = result.add_days(result.month_days - result.day + target_day)
        return result

    def sub_months(self, months=1):
        _check_count('months', months)
        target_month = self.month - months
        if target_month >= 1:
            return replace(self, month=target_month, day=min(self.day, month_length(self.year, target_month)))

        years, month_index = divmod(target_month - 1, 12)
        target_month = month_index + 1
        result = self.sub_years(-years)
        if target_month > result.month:
            return result.add_months(target_month - result.month)
        if target_month < result.month:
            return replace(result, month=target_month, day=min(self.day, month_length(result.year, target_month)))
        return result

    def add_years(self, years=1):
        _check_count('years', years)
        return self._shift_years(years)

    def sub_years(self, years=1):
        _check_count('years', years)
        return self._shift_years(-years)

    def _shift_years(self, years):
        year = self.year + years
        day = self.day
        if self.month == 12:
            # Esfand 30 only exists in leap years
            day = min(day, month_length(year, 12))
        return replace(self, year=year, day=day)

    add_month = add_months
    sub_month = sub_months
    add_year = add_years
    sub_year = sub_years

    def next_month(self):
        return self.add_months(1)

    # ------------------------------
    # Day/time arithmetic (through the Gregorian instant)
    # ------------------------------

    def _shift(self, delta, elapsed=False):
        instant = self.to_gregorian_instant()
        if elapsed and dj_timezone.is_aware(instant):
            # Hours and smaller count real time across offset changes
            instant = (instant.astimezone(dt_timezone.utc) + delta).astimezone(instant.tzinfo)
        else:
            instant = instant + delta
        return type(self).from_datetime(instant)

    def add_days(self, days=1):
        return self._shift(timedelta(days=days))

    def sub_days(self, days=1):
        return self._shift(-timedelta(days=days))

    def add_weeks(self, weeks=1):
        return self._shift(timedelta(weeks=weeks))

    def sub_weeks(self, weeks=1):
        return self._shift(-timedelta(weeks=weeks))

    def add_hours(self, hours=1):
        return self._shift(timedelta(hours=hours), elapsed=True)

    def sub_hours(self, hours=1):
        return self._shift(-timedelta(hours=hours), elapsed=True)

    def add_minutes(self, minutes=1):
        return self._shift(timedelta(minutes=minutes), elapsed=True)

    def sub_minutes(self, minutes=1):
        return self._shift(-timedelta(minutes=minutes), elapsed=True)

    def add_seconds(self, seconds=1):
        return self._shift(timedelta(seconds=seconds), elapsed=True)

    def sub_seconds(self, seconds=1):
        return self._shift(-timedelta(seconds=seconds), elapsed=True)

    add_day = add_days
    sub_day = sub_days
    add_week = add_weeks
    sub_week = sub_weeks
    add_hour = add_hours
    sub_hour = sub_hours
    add_minute = add_minutes
    sub_minute = sub_minutes
    add_second = add_seconds
    sub_second = sub_seconds

    def next_week(self):
        return self.add_days(7)

    # ------------------------------
    # Start/end of period
    # ------------------------------

    def start_of_day(self):
        return replace(self, hour=0, minute=0, second=0)

    def end_of_day(self):
        return replace(self, hour=23, minute=59, second=59)

    def start_of_week(self):
        start = self.start_of_day()
        return start.sub_days(self.day_of_week) if self.day_of_week else start

    def end_of_week(self):
        end = self.end_of_day()
        remaining = 6 - self.day_of_week
        return end.add_days(remaining) if remaining else end

    def start_of_month(self):
        return replace(self, day=1).start_of_day()

    def end_of_month(self):
        return replace(self, day=self.month_days).end_of_day()

    def start_of_year(self):
        return replace(self, month=1, day=1).start_of_day()

    def end_of_year(self):
        return replace(self, month=12, day=month_length(self.year, 12)).end_of_day()

    # ------------------------------
    # Comparison
    # ------------------------------

    def _instants(self, other, context=None):
        context = context or get_default_context()
        return as_aware_instant(self, context), as_aware_instant(other, context)

    def equal_to(self, other):
        first, second = self._instants(other)
        return first == second

    def not_equal_to(self, other):
        return not self.equal_to(other)

    def greater_than(self, other):
        first, second = self._instants(other)
        return first > second

    def greater_than_or_equal_to(self, other):
        first, second = self._instants(other)
        return first >= second

    def less_than(self, other):
        first, second = self._instants(other)
        return first < second

    def less_than_or_equal_to(self, other):
        first, second = self._instants(other)
        return first <= second

    is_after = greater_than
    is_before = less_than
    is_after_or_equal_to = greater_than_or_equal_to
    is_before_or_equal_to = less_than_or_equal_to

    def is_between(self, start, end, equal=True, context=None):
        context = context or get_default_context()
        instant, start = self._instants(start, context)
        end = as_aware_instant(end, context)
        if start > end:
            start, end = end, start
        if equal:
            return start <= instant <= end
        return start < instant < end

    def diff_in_days(self, other=None, absolute=True, context=None):
        """Whole days from this date to ``other`` (now by default)."""
        if other is None:
            other = (context or get_default_context()).now()
        first, second = self._instants(other, context)
        days = int((second - first).total_seconds() / 86400)
        return abs(days) if absolute else days

    def __eq__(self, other):
        if not isinstance(other, (PersianDate, date)):
            return NotImplemented
        return self.equal_to(other)

    def __lt__(self, other):
        if not isinstance(other, (PersianDate, date)):
            return NotImplemented
        return self.less_than(other)

    def __le__(self, other):
        if not isinstance(other, (PersianDate, date)):
            return NotImplemented
        return self.less_than_or_equal_to(other)

    def __gt__(self, other):
        if not isinstance(other, (PersianDate, date)):
            return NotImplemented
        return self.greater_than(other)

    def __ge__(self, other):
        if not isinstance(other, (PersianDate, date)):
            return NotImplemented
        return self.greater_than_or_equal_to(other)

    def __hash__(self):
        return hash(self.timestamp())

    # ------------------------------
    # Relative to now
    # ------------------------------

    def _today(self, context):
        return type(self).now(self.timezone, context)

    def is_today(self, context=None):
        today = self._today(context)
        return (self.year, self.month, self.day) == (today.year, today.month, today.day)

    def is_tomorrow(self, context=None):
        tomorrow = self._today(context).add_day()
        return (self.year, self.month, self.day) == (tomorrow.year, tomorrow.month, tomorrow.day)

    def is_yesterday(self, context=None):
        yesterday = self._today(context).sub_day()
        return (self.year, self.month, self.day) == (yesterday.year, yesterday.month, yesterday.day)

    def is_this_year(self, context=None):
        """True when this date falls in the current Persian year."""
        today = self._today(context)
        return self.is_between(today.start_of_year(), today.end_of_year(), context=context)

    def is_future(self, context=None):
        context = context or get_default_context()
        instant, now = self._instants(context.now(), context)
        return instant > now

    def is_past(self, context=None):
        context = context or get_default_context()
        instant, now = self._instants(context.now(), context)
        return instant < now

    def ago(self, context=None):
        return humanize.ago(self, context)

    # ------------------------------
    # Formatting
    # ------------------------------

    def format(self, format):
        return format_date(self, format)

    def to_date_string(self):
        return self.format('Y-m-d')

    def to_time_string(self):
        return self.format('H:i:s')

    def to_datetime_string(self):
        return self.format('Y-m-d H:i:s')

    def __str__(self):
        return self.to_datetime_string()
