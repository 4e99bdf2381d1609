from django.contrib import admin
from apps.staff.models import Office, LeaveRequest


@admin.register(Office)
class OfficeAdmin(admin.ModelAdmin):
    """Admin interface for Offices."""

    list_display = ['name', 'latitude', 'longitude', 'created_at']
    search_fields = ['name']
    filter_horizontal = ['managers']


@admin.register(LeaveRequest)
class LeaveRequestAdmin(admin.ModelAdmin):
    """Admin interface for Leave Requests."""

    list_display = ['manager', 'start_date', 'end_date', 'status', 'created_at']
    list_filter = ['status', 'start_date']
    search_fields = ['manager__email', 'reason']
    raw_id_fields = ['manager']
