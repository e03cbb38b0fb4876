from django.db import models

from activitylog.models import ActivityLogMixin


class Author(models.Model):
    name = models.CharField(max_length=255)

    def __str__(self):
        return self.name


class Post(models.Model):
    title = models.CharField(max_length=255)
    author = models.ForeignKey(Author, on_delete=models.SET_NULL, null=True, blank=True, related_name='posts')

    def __str__(self):
        return self.title


class ModerationEntry(ActivityLogMixin):
    """Moderation history stored in its own table."""
    reason = models.CharField(max_length=255, blank=True)

    class Meta(ActivityLogMixin.Meta):
        verbose_name_plural = 'Moderation entries'


class ReviewNote(ActivityLogMixin):
    """Activity model with its own primary key name."""
    note_id = models.BigAutoField(primary_key=True)
