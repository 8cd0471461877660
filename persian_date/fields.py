"""
Persistence adapter: store Gregorian datetimes, work with PersianDate.

PersianDateCast implements the get/set contract on plain values;
PersianDateTimeField wires it into the ORM:

    class Invoice(models.Model):
        issued_at = PersianDateTimeField()

    invoice.issued_at                             # PersianDate
    PersianDateCast(format='auto').get(dt)        # 'دیروز'
    PersianDateCast().serialize(PersianDate(1403, 1, 1))  # '2024-03-20 00:00:00'
"""
import logging

from django.conf import settings
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import models

from . import humanize
from .calendar_services.formatting import format_gregorian
from .conf import get_setting
from .context import get_default_context
from .dates import PersianDate
from .exceptions import PersianDateError

logger = logging.getLogger(__name__)

AUTO_FORMAT = 'auto'


class PersianDateCast:
    """
    Converts between stored Gregorian values and PersianDate.

    Args:
        format: optional pattern; when set, ``get`` returns a formatted string
            instead of a PersianDate. ``'auto'`` returns a proximity label
            (today, tomorrow, weekday name, ...).
        storage_format: Gregorian pattern used by ``serialize``.
        context: CalendarContext for "now" and the time zone values are
            read in.
    """

    def __init__(self, format=None, storage_format=None, context=None):
        self.format = format
        self.storage_format = storage_format or get_setting('STORAGE_FORMAT')
        self.context = context or get_default_context()

    def get(self, value):
        if value is None or value == '':
            return None
        if isinstance(value, PersianDate):
            return value.to_gregorian_instant()

        date = PersianDate.forge(value, timezone=self.context.timezone, context=self.context)
        if self.format == AUTO_FORMAT:
            return humanize.auto_label(date, self.context)
        if self.format:
            return date.format(self.format)
        return date

    def set(self, value):
        if value is None or value == '':
            return None
        return PersianDate.forge(value, context=self.context).to_gregorian_instant()

    def serialize(self, value):
        """Gregorian representation of ``value`` in the storage format."""
        instant = self.set(value)
        if instant is None:
            return None
        return format_gregorian(instant, self.storage_format)


class PersianDateTimeField(models.DateTimeField):
    """
    A DateTimeField whose Python value is a PersianDate.

    The database column holds the Gregorian datetime; reading it back yields a
    PersianDate in the configured PERSIAN_DATE['TIME_ZONE'].
    """

    description = 'Date (with time) in the Persian calendar'

    def from_db_value(self, value, expression, connection):
        if value is None:
            return value
        return self.to_python(value)

    def to_python(self, value):
        if value is None or isinstance(value, PersianDate):
            return value
        if isinstance(value, str):
            # Strings go through DateTimeField's own parsing and error messages
            value = super().to_python(value)
            if value is None:
                return None
        try:
            return PersianDateCast().get(value)
        except (PersianDateError, TypeError) as e:
            logger.warning("Rejected value %r for field %s: %s", value, self.name, e)
            raise DjangoValidationError(
                self.error_messages['invalid'],
                code='invalid',
                params={'value': value},
            ) from e

    def get_prep_value(self, value):
        value = models.Field.get_prep_value(self, value)
        if value is None:
            return None
        if isinstance(value, PersianDate):
            value = value.to_gregorian_instant()
        else:
            value = super().to_python(value)
        if value is not None and settings.USE_TZ:
            value = get_default_context().localize(value)
        return value

    def value_to_string(self, obj):
        value = self.value_from_object(obj)
        if isinstance(value, PersianDate):
            return value.to_gregorian_instant().isoformat()
        return super().value_to_string(obj)
