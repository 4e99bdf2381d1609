from django.conf import settings
from django.db import models
import uuid

from apps.accounts.models import UserRole


class Notification(models.Model):
    """
    A message shown in a user's dashboard.

    Role broadcasts are stored as one row per recipient, with
    ``target_role`` recording the audience.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='notifications'
    )
    title = models.CharField(max_length=200, blank=True)
    message = models.TextField()
    target_role = models.CharField(max_length=20, choices=UserRole.choices, blank=True)
    is_read = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'notifications'
        indexes = [
            models.Index(fields=['user', 'is_read'], name='notif_user_read_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return self.title or self.message[:50]


class BannerAd(models.Model):
    """Promotional banner on the public site."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    image_url = models.URLField(max_length=500)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'banner_ads'
        indexes = [
            models.Index(fields=['is_active', 'created_at'], name='banner_active_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return self.title
