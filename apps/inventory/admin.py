from django.contrib import admin
from django.utils.html import format_html

from apps.inventory.models import Project, Plot, Land, PropertyStatus

STATUS_COLORS = {
    PropertyStatus.AVAILABLE: 'green',
    PropertyStatus.ADVANCE: 'orange',
    PropertyStatus.SOLD: 'gray',
}


def status_badge(obj):
    color = STATUS_COLORS.get(obj.status, 'black')
    return format_html(
        '<span style="color: {}; font-weight: bold;">{}</span>',
        color,
        obj.get_status_display()
    )


status_badge.short_description = 'Status'


class PlotInline(admin.TabularInline):
    """Inline admin for the plots of a project."""
    model = Plot
    extra = 0
    fields = ['title', 'dimension', 'price', 'status']
    show_change_link = True


class LandInline(admin.TabularInline):
    """Inline admin for the lands of a plot."""
    model = Land
    extra = 0
    fields = ['number', 'size', 'price', 'status', 'owner']
    raw_id_fields = ['owner']


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    """Admin interface for Projects."""

    list_display = ['name', 'location', 'created_at']
    search_fields = ['name', 'location']
    readonly_fields = ['created_at', 'updated_at']
    inlines = [PlotInline]


@admin.register(Plot)
class PlotAdmin(admin.ModelAdmin):
    """Admin interface for Plots."""

    list_display = ['title', 'project', 'price_label', status_badge, 'owner', 'created_at']
    list_filter = ['status', 'project', 'facing']
    search_fields = ['title', 'location', 'project__name']
    readonly_fields = ['qr_url', 'created_at', 'updated_at']
    raw_id_fields = ['owner']
    inlines = [LandInline]


@admin.register(Land)
class LandAdmin(admin.ModelAdmin):
    """Admin interface for Lands."""

    list_display = ['number', 'plot', 'size', 'price', status_badge, 'owner', 'sold_at']
    list_filter = ['status', 'plot__project']
    search_fields = ['number', 'plot__title', 'owner__email']
    readonly_fields = ['created_at', 'updated_at']
    raw_id_fields = ['owner']
    date_hierarchy = 'created_at'
