"""
Tests for the clean_activitylog management command.
"""

from datetime import timedelta
from io import StringIO

from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import TestCase, override_settings
from django.utils import timezone

from activitylog.models import Activity


class CleanActivitylogCommandTest(TestCase):
    """Test the clean_activitylog command."""

    def setUp(self):
        now = timezone.now()
        self.old_default = self._create('old default', 'default', now - timedelta(days=400))
        self.old_auth = self._create('old auth', 'auth', now - timedelta(days=400))
        self.recent = self._create('recent', 'default', now - timedelta(days=20))
        self.fresh = self._create('fresh', 'default', now)

    def _create(self, description, log_name, created_at):
        activity = Activity().use_log(log_name).log(description)
        # auto_now_add ignores assigned values, so backdate with update()
        Activity.objects.filter(pk=activity.pk).update(created_at=created_at)
        return activity

    def _remaining(self):
        return set(Activity.objects.values_list('description', flat=True))

    def test_deletes_records_older_than_configured_retention(self):
        out = StringIO()
        call_command('clean_activitylog', stdout=out)

        self.assertEqual(self._remaining(), {'recent', 'fresh'})
        self.assertIn('Deleted 2 activities older than 365 days', out.getvalue())

    @override_settings(ACTIVITYLOG={'DELETE_RECORDS_OLDER_THAN_DAYS': 10})
    def test_uses_retention_setting(self):
        call_command('clean_activitylog', stdout=StringIO())
        self.assertEqual(self._remaining(), {'fresh'})

    def test_days_option_overrides_setting(self):
        call_command('clean_activitylog', '--days', '10', stdout=StringIO())
        self.assertEqual(self._remaining(), {'fresh'})

    def test_log_option_limits_cleanup(self):
        call_command('clean_activitylog', '--log', 'auth', stdout=StringIO())
        self.assertEqual(self._remaining(), {'old default', 'recent', 'fresh'})

    def test_dry_run_deletes_nothing(self):
        out = StringIO()
        call_command('clean_activitylog', '--dry-run', stdout=out)

        self.assertEqual(Activity.objects.count(), 4)
        self.assertIn('Would delete 2 activities', out.getvalue())

    def test_negative_days_rejected(self):
        with self.assertRaises(CommandError):
            call_command('clean_activitylog', '--days', '-1', stdout=StringIO())
