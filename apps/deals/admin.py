from django.contrib import admin
from apps.deals.models import BuyRequest, SellRequest


@admin.register(BuyRequest)
class BuyRequestAdmin(admin.ModelAdmin):
    """Admin interface for Buy Requests."""

    list_display = ['land', 'user', 'status', 'created_at']
    list_filter = ['status', 'created_at']
    search_fields = ['user__email', 'land__number', 'message']
    raw_id_fields = ['land', 'user']


@admin.register(SellRequest)
class SellRequestAdmin(admin.ModelAdmin):
    """Admin interface for Sell Requests."""

    list_display = [
        'land',
        'user',
        'asking_price',
        'potential_profit',
        'profit_percentage',
        'urgency',
        'status',
        'created_at',
    ]
    list_filter = ['status', 'urgency', 'agent_assistance']
    search_fields = ['user__email', 'land__number', 'plot__title', 'reason']
    readonly_fields = [
        'potential_profit',
        'profit_percentage',
        'approved_at',
        'rejected_at',
        'completed_at',
        'created_at',
        'updated_at',
    ]
    raw_id_fields = ['plot', 'land', 'user']
