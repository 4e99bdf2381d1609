from django.contrib import admin
from django.utils.html import format_html

from apps.visits.models import VisitRequest, VisitStatus, Feedback


@admin.register(VisitRequest)
class VisitRequestAdmin(admin.ModelAdmin):
    """Admin interface for Visit Requests."""

    list_display = [
        'name',
        'email',
        'plot',
        'date',
        'time',
        'status_badge',
        'assigned_manager',
        'expires_at',
    ]
    list_filter = ['status', 'date']
    search_fields = ['name', 'email', 'phone', 'plot__title']
    readonly_fields = ['qr_code', 'approved_at', 'expires_at', 'created_at', 'updated_at']
    raw_id_fields = ['user', 'plot', 'assigned_manager']
    date_hierarchy = 'date'

    def status_badge(self, obj):
        colors = {
            VisitStatus.PENDING: 'orange',
            VisitStatus.APPROVED: 'green',
            VisitStatus.REJECTED: 'red',
            VisitStatus.COMPLETED: 'gray',
        }
        return format_html(
            '<span style="color: {}; font-weight: bold;">{}</span>',
            colors.get(obj.status, 'black'),
            obj.get_status_display()
        )
    status_badge.short_description = 'Status'


@admin.register(Feedback)
class FeedbackAdmin(admin.ModelAdmin):
    """Admin interface for visit Feedback."""

    list_display = ['visit_request', 'user', 'rating', 'purchase_interest', 'created_at']
    list_filter = ['rating', 'purchase_interest']
    search_fields = ['user__email', 'experience', 'suggestions']
    raw_id_fields = ['visit_request', 'user']
