"""
Activity Service

Convenience layer over the Activity builder for code that prefers a single
call over method chaining.

Log Name Convention:
    Group related activities under one log name, e.g.

        - default
        - auth
        - billing
        - moderation
"""

import logging
from typing import Any, Mapping, Optional

from django.db.models import Model, QuerySet

from .models import Activity

logger = logging.getLogger(__name__)


class ActivityService:
    """
    Service for writing and querying activities.

    Example:
        >>> from activitylog.service import ActivityService
        >>> service = ActivityService()
        >>>
        >>> # Chain the builder yourself
        >>> service.activity('moderation').on(post).by(user).log('Hid post')
        >>>
        >>> # Or log in one call
        >>> service.log(
        ...     'Published post',
        ...     subject=post,
        ...     causer=user,
        ...     properties={'channel': 'web'},
        ... )
    """

    def activity(self, log_name: Optional[str] = None) -> Activity:
        """
        Start a new, unsaved activity.

        Args:
            log_name: Optional log name (defaults to the configured default)

        Returns:
            Unsaved Activity instance ready for chaining
        """
        activity = Activity()
        if log_name is not None:
            activity.use_log(log_name)
        return activity

    def log(
        self,
        description: str,
        *,
        subject: Optional[Model] = None,
        causer: Optional[Model] = None,
        properties: Optional[Mapping[str, Any]] = None,
        log_name: Optional[str] = None,
    ) -> Activity:
        """
        Build and save an activity in one call.

        Args:
            description: Human-readable description
            subject: Optional object the activity was performed on
            causer: Optional object that caused the activity
            properties: Optional extra properties
            log_name: Optional log name

        Returns:
            Saved Activity instance

        Raises:
            InvalidActivityArgument: If subject or causer is not a saved model
        """
        activity = self.activity(log_name).performed_on(subject).caused_by(causer)
        if properties is not None:
            activity.with_properties(properties)

        try:
            return activity.log(description)
        except Exception as e:
            logger.error(f"Failed to log activity: {description} - {e}")
            raise

    def latest(
        self,
        limit: int = 50,
        *,
        log_name: Optional[str] = None,
        subject: Optional[Model] = None,
        causer: Optional[Model] = None,
    ) -> QuerySet[Activity]:
        """
        Get latest activities with optional filtering.

        Args:
            limit: Maximum number of activities to return
            log_name: Optional log name filter
            subject: Optional subject filter
            causer: Optional causer filter

        Returns:
            QuerySet of Activity instances, newest first
        """
        queryset = Activity.objects.all()

        if log_name is not None:
            queryset = queryset.in_log(log_name)
        if subject is not None:
            queryset = queryset.for_subject(subject)
        if causer is not None:
            queryset = queryset.caused_by(causer)

        return queryset.order_by('-created_at', '-pk')[:limit]
