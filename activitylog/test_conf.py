"""
Tests for the activity log configuration layer.
"""

from django.core.exceptions import ImproperlyConfigured
from django.test import TestCase, override_settings

from activitylog import conf


class ActivityLogConfTestCase(TestCase):
    """Test cases for activitylog.conf."""

    @override_settings(ACTIVITYLOG={})
    def test_defaults_when_not_configured(self):
        self.assertEqual(conf.get_default_log_name(), 'default')
        self.assertEqual(conf.get_retention_days(), 365)

    @override_settings(ACTIVITYLOG=None)
    def test_defaults_when_setting_is_none(self):
        self.assertEqual(conf.get_default_log_name(), 'default')

    @override_settings(ACTIVITYLOG={'DEFAULT_LOG_NAME': 'audit', 'DELETE_RECORDS_OLDER_THAN_DAYS': '30'})
    def test_configured_values(self):
        self.assertEqual(conf.get_default_log_name(), 'audit')
        self.assertEqual(conf.get_retention_days(), 30)

    def test_unknown_setting_raises(self):
        with self.assertRaises(ImproperlyConfigured):
            conf.get_setting('NOT_A_SETTING')

    @override_settings(ACTIVITYLOG=['DEFAULT_LOG_NAME'])
    def test_non_dict_setting_raises(self):
        with self.assertRaises(ImproperlyConfigured):
            conf.get_default_log_name()
