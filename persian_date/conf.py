"""
Settings access for the persian_date app.

Projects override the defaults with a PERSIAN_DATE dict in their Django
settings:

    PERSIAN_DATE = {
        'TIME_ZONE': 'Asia/Tehran',
        'STORAGE_FORMAT': 'Y-m-d H:i:s',
        'PERSIAN_DIGITS': True,
    }

When Django settings are not configured (plain library use) the defaults
below are returned.
"""
from django.conf import settings

DEFAULTS = {
    'TIME_ZONE': 'Asia/Tehran',
    'STORAGE_FORMAT': 'Y-m-d H:i:s',
    'PERSIAN_DIGITS': True,
}


def get_setting(name):
    """Return a PERSIAN_DATE setting, falling back to DEFAULTS."""
    if name not in DEFAULTS:
        raise KeyError(f"Unknown persian_date setting: {name}")
    if not settings.configured:
        return DEFAULTS[name]
    overrides = getattr(settings, 'PERSIAN_DATE', None) or {}
    return overrides.get(name, DEFAULTS[name])
