"""
Management command to delete old activity log records.

Records older than the retention period (ACTIVITYLOG['DELETE_RECORDS_OLDER_THAN_DAYS']
unless --days is given) are removed, optionally only from selected logs.
"""

import logging
from datetime import timedelta

from django.core.management.base import BaseCommand, CommandError
from django.utils import timezone

from activitylog.conf import get_retention_days
from activitylog.models import Activity

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'Delete activity log records older than the retention period'

    def add_arguments(self, parser):
        parser.add_argument(
            '--days',
            type=int,
            help='Delete records older than this many days (defaults to the configured retention)',
        )
        parser.add_argument(
            '--log',
            action='append',
            dest='log_names',
            help='Only clean this log name (can be repeated)',
        )
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Show how many records would be deleted without deleting them',
        )

    def handle(self, *args, **options):
        days = options.get('days')
        if days is None:
            days = get_retention_days()
        if days < 0:
            raise CommandError('--days must not be negative')

        log_names = options.get('log_names')
        dry_run = options['dry_run']

        cutoff = timezone.now() - timedelta(days=days)
        queryset = Activity.objects.filter(created_at__lt=cutoff)
        if log_names:
            queryset = queryset.in_log(*log_names)

        count = queryset.count()

        if dry_run:
            self.stdout.write(self.style.WARNING(
                f'DRY RUN: Would delete {count} activities older than {days} days.'
            ))
            return

        queryset.delete()
        logger.info(f"Deleted {count} activities older than {days} days")
        self.stdout.write(self.style.SUCCESS(
            f'Deleted {count} activities older than {days} days.'
        ))
