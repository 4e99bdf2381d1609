from django.contrib import admin
from apps.announcements.models import Notification, BannerAd


@admin.register(Notification)
class NotificationAdmin(admin.ModelAdmin):
    """Admin interface for Notifications."""

    list_display = ['title', 'user', 'target_role', 'is_read', 'created_at']
    list_filter = ['target_role', 'is_read']
    search_fields = ['title', 'message', 'user__email']
    raw_id_fields = ['user']


@admin.register(BannerAd)
class BannerAdAdmin(admin.ModelAdmin):
    """Admin interface for Banner Ads."""

    list_display = ['title', 'is_active', 'created_at']
    list_filter = ['is_active']
    search_fields = ['title', 'description']
