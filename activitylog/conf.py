"""
Configuration for the activity log app.

Settings are read from the ``ACTIVITYLOG`` dict in Django settings:

    ACTIVITYLOG = {
        'DEFAULT_LOG_NAME': 'default',
        'DELETE_RECORDS_OLDER_THAN_DAYS': 365,
    }

Values are looked up on every call so ``override_settings`` takes effect
immediately.
"""

from typing import Any

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured


SETTINGS_NAME = 'ACTIVITYLOG'

DEFAULTS = {
    'DEFAULT_LOG_NAME': 'default',
    'DELETE_RECORDS_OLDER_THAN_DAYS': 365,
}


def get_setting(name: str) -> Any:
    """
    Get a single activity log setting, falling back to its default.

    Args:
        name: Key inside the ACTIVITYLOG settings dict

    Returns:
        The configured value or the built-in default

    Raises:
        ImproperlyConfigured: If the key is unknown or ACTIVITYLOG is not a dict
    """
    if name not in DEFAULTS:
        raise ImproperlyConfigured(f"Unknown {SETTINGS_NAME} setting: {name}")

    user_settings = getattr(settings, SETTINGS_NAME, None) or {}
    if not isinstance(user_settings, dict):
        raise ImproperlyConfigured(f"{SETTINGS_NAME} must be a dict")

    return user_settings.get(name, DEFAULTS[name])


def get_default_log_name() -> str:
    """Log name used for activities that never call use_log()."""
    return get_setting('DEFAULT_LOG_NAME')


def get_retention_days() -> int:
    """Age in days after which clean_activitylog removes records."""
    return int(get_setting('DELETE_RECORDS_OLDER_THAN_DAYS'))
