# -*- coding: utf-8 -*-
"""
Management command to convert a date between the Gregorian and Persian calendars.

Usage:
    python manage.py convert_date 2024-03-20
    python manage.py convert_date 2024-03-20T14:30 --format "l j F Y H:i"
    python manage.py convert_date 1403-01-01 --to-gregorian
    python manage.py convert_date "1403/01/01 08:15" --to-gregorian --input-format "Y/m/d H:i"
"""
from django.core.management.base import BaseCommand, CommandError

from persian_date.calendar_services.formatting import format_gregorian
from persian_date.dates import PersianDate
from persian_date.exceptions import PersianDateError


class Command(BaseCommand):
    help = 'Convert a Gregorian date to the Persian calendar, or back with --to-gregorian.'

    def add_arguments(self, parser):
        parser.add_argument('date', help='Date to convert (ISO-8601 for Gregorian input).')
        parser.add_argument(
            '--to-gregorian',
            action='store_true',
            help='Treat the input as a Persian date and print the Gregorian date.',
        )
        parser.add_argument(
            '--input-format',
            default='Y-m-d',
            help='Pattern of a Persian input date (default: Y-m-d).',
        )
        parser.add_argument(
            '--format',
            default=None,
            help='Output pattern (default: Y-m-d H:i:s).',
        )

    def handle(self, *args, **options):
        output_format = options['format'] or 'Y-m-d H:i:s'
        try:
            if options['to_gregorian']:
                persian = PersianDate.from_format(options['input_format'], options['date'])
                result = format_gregorian(persian.to_gregorian_instant(), output_format)
            else:
                result = PersianDate.forge(options['date']).format(output_format)
        except (PersianDateError, TypeError) as e:
            raise CommandError(f'Cannot convert {options["date"]!r}: {e}') from e

        self.stdout.write(self.style.SUCCESS(result))
