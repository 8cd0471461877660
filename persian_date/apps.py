import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class PersianDateConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'persian_date'
    verbose_name = 'Persian date'

    def ready(self):
        """Resolve the configured time zone so a bad PERSIAN_DATE setting fails at startup."""
        from .conf import get_setting
        from .context import resolve_timezone

        zone = resolve_timezone(get_setting('TIME_ZONE'))
        logger.debug('persian_date ready, default time zone %s', zone)
