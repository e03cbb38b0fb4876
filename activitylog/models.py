"""
Activity Log Models

ActivityLogMixin adds activity fields and the fluent builder API to any model.
Activity is the concrete model shipped with the app.

Subject and causer are polymorphic: the content type stored next to the id
decides which model the reference resolves to.
"""

import logging
from collections.abc import Mapping

from django.contrib.contenttypes.fields import GenericForeignKey
from django.contrib.contenttypes.models import ContentType
from django.db import models

from .conf import get_default_log_name
from .exceptions import InvalidActivityArgument

logger = logging.getLogger(__name__)


# Relations resolved on every read
RELATIONS = ('subject', 'causer')


def populate_relations(queryset):
    """Attach subject and causer resolution to a queryset."""
    return queryset.prefetch_related(*RELATIONS)


# ============================================================================
# CUSTOM MANAGER AND QUERYSET
# ============================================================================

class ActivityQuerySet(models.QuerySet):
    """Queryset for activities with filtering helpers"""

    def in_log(self, *log_names):
        """Filter activities written to any of the given logs"""
        return self.filter(log_name__in=log_names)

    def for_subject(self, subject):
        """Filter activities performed on a specific object"""
        return self.filter(
            subject_type=ContentType.objects.get_for_model(subject),
            subject_id=str(subject.pk),
        )

    def caused_by(self, causer):
        """Filter activities caused by a specific object"""
        return self.filter(
            causer_type=ContentType.objects.get_for_model(causer),
            causer_id=str(causer.pk),
        )


class ActivityManager(models.Manager.from_queryset(ActivityQuerySet)):
    """
    Default manager for activities.

    Every queryset it hands out resolves subject and causer, so get(),
    first() and plain iteration all return populated records.
    """

    def get_queryset(self):
        return populate_relations(super().get_queryset())


# ============================================================================
# ACTIVITY LOG MIXIN
# ============================================================================

def _check_reference(entity, method_name):
    if not isinstance(entity, models.Model):
        raise InvalidActivityArgument(
            f"Invalid {method_name}() argument. Must be a model instance, "
            f"got {type(entity).__name__}."
        )
    if entity.pk is None or entity._state.adding:
        raise InvalidActivityArgument(
            f"Invalid {method_name}() argument. {entity.__class__.__name__} "
            f"must be saved before it can be referenced."
        )


class ActivityLogMixin(models.Model):
    """
    Abstract model with activity log fields and builder methods.

    Example:
        >>> Activity().performed_on(post).caused_by(user) \\
        ...     .with_property('ip', '127.0.0.1') \\
        ...     .log('Edited post')
    """

    log_name = models.CharField(max_length=255, default=get_default_log_name, db_index=True)
    description = models.TextField(blank=True)

    subject_type = models.ForeignKey(
        ContentType,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='+',
    )
    subject_id = models.CharField(max_length=255, null=True, blank=True)
    subject = GenericForeignKey('subject_type', 'subject_id')

    causer_type = models.ForeignKey(
        ContentType,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='+',
    )
    causer_id = models.CharField(max_length=255, null=True, blank=True)
    causer = GenericForeignKey('causer_type', 'causer_id')

    properties = models.JSONField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = ActivityManager()

    class Meta:
        abstract = True
        ordering = ['-created_at', '-pk']

    def __str__(self):
        return f"[{self.log_name}] {self.description}"

    def log(self, description):
        """
        Set the description and save the activity.

        Calling log() again on the same instance updates the stored record.

        Returns:
            The saved instance
        """
        self.description = description
        self.save()
        logger.debug(f"Activity logged: [{self.log_name}] {description} (pk={self.pk})")
        return self

    def use_log(self, log_name):
        """Write the activity to a specific log."""
        self.log_name = log_name
        return self

    def performed_on(self, entity=None):
        """
        Set the object the activity was performed on.

        Args:
            entity: Saved model instance, or None to leave the subject unset

        Raises:
            InvalidActivityArgument: If entity is not a saved model instance
        """
        if entity is None:
            return self
        _check_reference(entity, 'performed_on')
        self.subject = entity
        return self

    def caused_by(self, entity=None):
        """
        Set who or what caused the activity.

        Args:
            entity: Saved model instance, or None to leave the causer unset

        Raises:
            InvalidActivityArgument: If entity is not a saved model instance
        """
        if entity is None:
            return self
        _check_reference(entity, 'caused_by')
        self.causer = entity
        return self

    def with_properties(self, properties):
        """Replace all properties with a copy of the given mapping."""
        if not isinstance(properties, Mapping):
            raise InvalidActivityArgument(
                f"Invalid with_properties() argument. Must be a mapping, "
                f"got {type(properties).__name__}."
            )
        self.properties = dict(properties)
        return self

    def with_property(self, key, value):
        """Add or overwrite a single property."""
        if self.properties is None:
            self.properties = {}
        self.properties[key] = value
        return self

    def get_extra_property(self, key, default=None):
        """
        Get a single property value.

        Returns default when no properties were set or the key is missing.
        """
        if not self.properties:
            return default
        return self.properties.get(key, default)

    def with_(self, *args):
        """Alias of with_property(key, value) or with_properties(mapping)."""
        if len(args) == 2:
            return self.with_property(*args)
        return self.with_properties(*args)

    # Short aliases
    use = use_log
    on = performed_on
    by = caused_by


# ============================================================================
# ACTIVITY MODEL
# ============================================================================

class Activity(ActivityLogMixin):
    """Activity log entry."""

    class Meta(ActivityLogMixin.Meta):
        verbose_name_plural = 'Activities'
        indexes = [
            models.Index(fields=['subject_type', 'subject_id'], name='activitylog_subject_idx'),
            models.Index(fields=['causer_type', 'causer_id'], name='activitylog_causer_idx'),
        ]
