"""
Calendar context: the default time zone and the clock used for "now".

Operations that depend on the current moment (now, ago, is_today, ...) take an
optional ``context`` argument instead of reading process-wide state, so tests
can pin the clock:

    ctx = CalendarContext.frozen_at(datetime(2024, 3, 20, 12, 0), 'Asia/Tehran')
    PersianDate.now(context=ctx)  # 1403-01-01 12:00:00
"""
import re
import zoneinfo
from datetime import datetime, timedelta, timezone as dt_timezone, tzinfo

from django.utils import timezone as dj_timezone

from .conf import get_setting
from .exceptions import ValidationError

_OFFSET_RE = re.compile(r'^(?:UTC|GMT)?([+-])(\d{1,2}):?(\d{2})?$', re.IGNORECASE)


def resolve_timezone(value):
    """
    Turn a zone name, UTC offset string or timedelta into a tzinfo.

    Accepts None (returned unchanged), any tzinfo, 'UTC', '+03:30', '-0500',
    'GMT+4' and IANA names such as 'Asia/Tehran'.
    """
    if value is None or isinstance(value, tzinfo):
        return value
    if isinstance(value, timedelta):
        return dt_timezone(value)

    name = str(value).strip()
    if name.upper() in ('UTC', 'GMT', 'Z'):
        return dt_timezone.utc

    match = _OFFSET_RE.match(name)
    if match:
        sign, hours, minutes = match.groups()
        offset = timedelta(hours=int(hours), minutes=int(minutes or 0))
        if offset >= timedelta(hours=24):
            raise ValidationError('timezone', value, message='Invalid UTC offset: %(value)s', code='invalid_timezone')
        return dt_timezone(-offset if sign == '-' else offset)

    try:
        return zoneinfo.ZoneInfo(name)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError) as e:
        raise ValidationError('timezone', value, message='Unknown time zone: %(value)s', code='invalid_timezone') from e


class CalendarContext:
    """Default time zone plus a clock callable returning the current datetime."""

    def __init__(self, timezone=None, clock=None):
        if timezone is None:
            timezone = get_setting('TIME_ZONE')
        self.timezone = resolve_timezone(timezone)
        self.clock = clock

    @classmethod
    def frozen_at(cls, moment, timezone=None):
        """Context whose clock always returns ``moment``."""
        context = cls(timezone=timezone)
        if dj_timezone.is_naive(moment):
            moment = dj_timezone.make_aware(moment, context.timezone)
        context.clock = lambda: moment
        return context

    def now(self, timezone=None):
        zone = resolve_timezone(timezone) if timezone is not None else self.timezone
        if self.clock is None:
            return datetime.now(zone)
        current = self.clock()
        if dj_timezone.is_naive(current):
            current = dj_timezone.make_aware(current, self.timezone)
        return current.astimezone(zone)

    def localize(self, value):
        """Attach the default zone to a naive datetime; aware values pass through."""
        if dj_timezone.is_naive(value):
            return dj_timezone.make_aware(value, self.timezone)
        return value

    def __repr__(self):
        return f"CalendarContext(timezone={self.timezone!r}, clock={self.clock!r})"


def get_default_context():
    return CalendarContext()
