from django.core.validators import RegexValidator
from django.utils.translation import gettext_lazy as _

from .calendar_services.jalali_calendar import MAX_YEAR, MIN_YEAR, month_length
from .exceptions import ParseError, ValidationError


def validate_range(field, value, min_value, max_value):
    """Raise ValidationError unless min_value <= value <= max_value."""
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError(
            field, value, min_value, max_value,
            message='%(field)s must be an integer, got %(value)r.',
            code='invalid_type',
        )
    if not min_value <= value <= max_value:
        raise ValidationError(field, value, min_value, max_value)
    return value


def validate_persian_date(year, month, day, hour=0, minute=0, second=0):
    """
    Validates the fields of a Persian date/time.

    Rules:
    - Year between 1000 and 3000
    - Month between 1 and 12
    - Day between 1 and 31 for months 1-6, 1 and 30 for months 7-11
    - Esfand (month 12) has 30 days in leap years and 29 otherwise
    - Hour between 0 and 24, minute and second between 0 and 59
    """
    validate_range('year', year, MIN_YEAR, MAX_YEAR)
    validate_range('month', month, 1, 12)
    validate_range('day', day, 1, month_length(year, month))
    validate_range('hour', hour, 0, 24)
    validate_range('minute', minute, 0, 59)
    validate_range('second', second, 0, 59)


# Regex validator for form fields holding a Persian date as YYYY/MM/DD
persian_date_regex = RegexValidator(
    regex=r'^\d{4}[/-]\d{1,2}[/-]\d{1,2}$',
    message=_('تاریخ باید به صورت ۱۴۰۳/۰۱/۰۱ وارد شود.'),
    code='invalid_persian_date'
)


class PersianDateStringValidator:
    """
    Custom validator class for Persian date strings.
    Can be used in model fields or forms.
    """

    def __init__(self, format='Y/m/d'):
        self.format = format

    def __call__(self, value):
        # Imported here; dates imports this module.
        from .dates import PersianDate

        try:
            PersianDate.from_format(self.format, value)
        except ParseError as e:
            raise ValidationError(
                'date', value,
                message='%(value)s is not a valid Persian date.',
                code='invalid_persian_date',
            ) from e

    def __eq__(self, other):
        return isinstance(other, PersianDateStringValidator) and self.format == other.format
