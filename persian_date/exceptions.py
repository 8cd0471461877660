"""
Exceptions raised by the persian_date app.

ValidationError is a Django ValidationError so it can be raised from model
fields and forms unchanged; it also carries the offending field and its
allowed range as attributes.
"""
from django.core.exceptions import ValidationError as DjangoValidationError


class PersianDateError(Exception):
    """Base class for every error raised by this package."""


class ValidationError(PersianDateError, DjangoValidationError):
    """A date/time field is outside its allowed range."""

    def __init__(self, field, value, min_value=None, max_value=None, message=None, code='out_of_range'):
        self.field = field
        self.value = value
        self.min_value = min_value
        self.max_value = max_value
        if message is None:
            message = '%(field)s must be between %(min_value)s and %(max_value)s, got %(value)s.'
        DjangoValidationError.__init__(
            self,
            message,
            code=code,
            params={
                'field': field,
                'value': value,
                'min_value': min_value,
                'max_value': max_value,
            },
        )


class ConversionError(PersianDateError, ValueError):
    """A date could not be converted between the two calendars."""


class ParseError(PersianDateError, ValueError):
    """A string did not match the expected date pattern."""
