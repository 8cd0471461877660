from datetime import date, datetime

from django import template

from persian_date import humanize
from persian_date.conf import get_setting
from persian_date.context import get_default_context
from persian_date.dates import PersianDate
from persian_date.utils import to_persian_digits

register = template.Library()


def _to_persian(value):
    """PersianDate for a PersianDate/date/datetime value, None for anything else."""
    if isinstance(value, PersianDate):
        return value
    if isinstance(value, datetime):
        # Aware values are shown in the configured zone
        zone = get_default_context().timezone if value.tzinfo is not None else None
        return PersianDate.from_datetime(value, zone)
    if isinstance(value, date):
        return PersianDate.from_datetime(value)
    return None


def _digits(value_str):
    if get_setting('PERSIAN_DIGITS'):
        return to_persian_digits(value_str)
    return value_str


@register.filter
def persian_date(value):
    """Convert datetime to Persian date format"""
    persian = _to_persian(value)
    if persian is None:
        return ""

    # Format: 1402/12/25 14:30 (or just date if original was date)
    if isinstance(value, date) and not isinstance(value, datetime):
        return _digits(persian.format('Y/m/d'))
    return _digits(persian.format('Y/m/d H:i'))


@register.filter
def persian_date_only(value):
    """Convert datetime to Persian date only (without time)"""
    persian = _to_persian(value)
    if persian is None:
        return ""
    return _digits(persian.format('Y/m/d'))


@register.filter
def persian_time_only(value):
    """Convert datetime to Persian time only"""
    # DateField values have no time component
    if isinstance(value, date) and not isinstance(value, datetime):
        return ""
    persian = _to_persian(value)
    if persian is None:
        return ""
    return _digits(persian.format('H:i'))


@register.filter
def persian_month_name(value):
    """Get Persian month name"""
    persian = _to_persian(value)
    return persian.month_name if persian else ""


@register.filter
def persian_weekday_name(value):
    """Get Persian weekday name"""
    persian = _to_persian(value)
    return persian.weekday_name if persian else ""


@register.filter
def persian_format(value, pattern='Y/m/d'):
    """
    Format a value with the PersianDate pattern language.

        {{ ticket.created_at|persian_format:"l j F Y" }}
    """
    persian = _to_persian(value)
    if persian is None:
        return ""
    return _digits(persian.format(pattern))


@register.filter
def persian_ago(value):
    """Elapsed time such as '۳ ساعت پیش'"""
    persian = _to_persian(value)
    if persian is None:
        return ""
    return _digits(persian.ago())


@register.filter
def persian_auto(value):
    """Today / tomorrow / yesterday / weekday / day and month label"""
    persian = _to_persian(value)
    if persian is None:
        return ""
    return _digits(humanize.auto_label(persian))
