"""
Human readable Persian wording for dates relative to now.

    ago(date)         -> '3 ساعت پیش' style elapsed time
    auto_label(date)  -> 'امروز', 'فردا', 'دیروز', a weekday name, '5 مهر'
                         or '5 مهر 1402' depending on how close the date is
"""
import math

from .context import get_default_context

PERIODS = ('ثانیه', 'دقیقه', 'ساعت', 'روز', 'هفته', 'ماه', 'سال', 'قرن')

# How many of each period make up the next one
LENGTHS = (60, 60, 24, 7, 4.35, 12, 10)

DAY_INDEX = PERIODS.index('روز')

MOMENTS_AGO = 'لحظاتی پیش'
TODAY = 'امروز'
TOMORROW = 'فردا'
YESTERDAY = 'دیروز'
PAST_SUFFIX = 'پیش'
FUTURE_SUFFIX = 'آینده'


def ago(value, context=None):
    """Elapsed time between ``value`` (a PersianDate) and now, in Persian."""
    context = context or get_default_context()
    difference = context.now().timestamp() - value.timestamp(context)
    future = difference < 0
    difference = abs(difference)

    index = 0
    while index < len(LENGTHS) and difference >= LENGTHS[index]:
        difference /= LENGTHS[index]
        index += 1

    # Round half up
    amount = math.floor(difference + 0.5)

    if index == DAY_INDEX and amount == 1:
        return TOMORROW if future else YESTERDAY
    if index == 0 and amount < 30:
        return MOMENTS_AGO

    suffix = FUTURE_SUFFIX if future else PAST_SUFFIX
    return f"{amount:,} {PERIODS[index]} {suffix}"


def auto_label(value, context=None):
    """
    Short label for ``value`` based on its distance from today:

    - today / tomorrow / yesterday
    - the weekday name inside the current week
    - day and month inside the current year
    - day, month and year otherwise
    """
    today = type(value).now(value.timezone, context)
    current = (value.year, value.month, value.day)

    if current == (today.year, today.month, today.day):
        return TODAY
    tomorrow = today.add_day()
    if current == (tomorrow.year, tomorrow.month, tomorrow.day):
        return TOMORROW
    yesterday = today.sub_day()
    if current == (yesterday.year, yesterday.month, yesterday.day):
        return YESTERDAY

    week_start = today.start_of_week()
    week_end = today.end_of_week()
    if (week_start.year, week_start.month, week_start.day) <= current <= (week_end.year, week_end.month, week_end.day):
        return value.weekday_name
    if value.year == today.year:
        return value.format('j F')
    return value.format('j F Y')
