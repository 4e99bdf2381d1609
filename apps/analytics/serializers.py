"""
Serializers for analytics app.

This module contains:
1. Input serializers - Query parameter validation
2. Response serializers - API documentation and output formatting
"""

from rest_framework import serializers


# =============================================================================
# Input Serializers (Query Parameter Validation)
# =============================================================================

class SalesStatsQuerySerializer(serializers.Serializer):
    """
    Validate sales-stats query parameters.

    Query Parameters:
        year (int): Only include sales from this year
    """

    year = serializers.IntegerField(required=False, min_value=2000, max_value=2100)


# =============================================================================
# Response Serializers
# =============================================================================

class MonthlySalesSerializer(serializers.Serializer):
    """One month of land sales."""

    month = serializers.CharField(help_text='YYYY-MM')
    total_sales = serializers.DecimalField(max_digits=16, decimal_places=2)
    sales_count = serializers.IntegerField()


class StatusCountsField(serializers.DictField):
    """Mapping of status (or role) to row count."""

    child = serializers.IntegerField()


class OverviewSerializer(serializers.Serializer):
    """Entity counts for the super-admin dashboard."""

    projects = serializers.IntegerField()
    plots = StatusCountsField()
    lands = StatusCountsField()
    users = StatusCountsField()
    visit_requests = StatusCountsField()
    buy_requests = StatusCountsField()
    sell_requests = StatusCountsField()
    offices = serializers.IntegerField()
