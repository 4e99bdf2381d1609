"""
Analytics Module
=================

This module provides read-only queries for the dashboard overview and
sales charts. It aggregates data from inventory, accounts, visits and
deals.

Classes:
    AnalyticsQueries: Static methods for the analytics endpoints.

Example:
    Monthly sales for the area chart::

        from apps.analytics.analytics import AnalyticsQueries

        for point in AnalyticsQueries.sales_by_month():
            print(f"{point['month']}: {point['total_sales']}")
        # 2025-01: 250000.00
        # 2025-02: 410000.00

Note:
    This module is read-only and doesn't modify any data. All methods
    are static and can be called without instantiation.
"""

from decimal import Decimal

from django.db.models import Count
from django.utils import timezone

from apps.accounts.models import User, UserRole
from apps.inventory.models import Project, Plot, Land, PropertyStatus
from apps.visits.models import VisitRequest, VisitStatus
from apps.deals.models import BuyRequest, BuyRequestStatus, SellRequest, SellRequestStatus
from apps.staff.models import Office


def _count_by(queryset, field, choices):
    """Count rows per choice value, with zero for values that have no rows."""
    counts = {value: 0 for value in choices.values}
    for row in queryset.values(field).annotate(count=Count('id')):
        counts[row[field]] = row['count']
    return counts


class AnalyticsQueries:
    """
    Queries for analytics endpoints.

    Methods:
        sales_by_month: Revenue from sold lands, grouped by month.
        overview: Entity counts for the super-admin dashboard.

    Note:
        All methods return plain dictionaries or lists, not Django objects,
        making them suitable for JSON serialization in API responses.
    """

    @staticmethod
    def sales_by_month(year=None):
        """
        Sum the prices of SOLD lands per month.

        A land is counted in the month it was sold. Lands sold before
        ``sold_at`` was recorded fall back to their creation date.

        Args:
            year (int, optional): Only include sales from this year.
                Defaults to all years.

        Returns:
            list[dict]: Sorted ascending by month, each containing:
                - month (str): ``YYYY-MM``.
                - total_sales (Decimal): Sum of land prices.
                - sales_count (int): Number of lands sold.

            An empty list when nothing has been sold.

        Example:
            ::

                AnalyticsQueries.sales_by_month()
                # [{'month': '2025-01', 'total_sales': Decimal('250000.00'), 'sales_count': 2}]
        """
        lands = Land.objects.filter(status=PropertyStatus.SOLD).only(
            'price', 'sold_at', 'created_at'
        )

        sales_by_month = {}
        for land in lands:
            sold_at = timezone.localtime(land.sold_at or land.created_at)
            if year and sold_at.year != year:
                continue

            month_key = sold_at.strftime('%Y-%m')
            if month_key not in sales_by_month:
                sales_by_month[month_key] = {
                    'total': Decimal('0.00'),
                    'count': 0,
                }
            sales_by_month[month_key]['total'] += land.price
            sales_by_month[month_key]['count'] += 1

        return [
            {
                'month': month,
                'total_sales': data['total'],
                'sales_count': data['count'],
            }
            for month, data in sorted(sales_by_month.items())
        ]

    @staticmethod
    def overview():
        """
        Count the main entities for the super-admin dashboard.

        Returns:
            dict: Containing:
                - projects (int)
                - plots (dict): Count per PropertyStatus.
                - lands (dict): Count per PropertyStatus.
                - users (dict): Count per UserRole.
                - visit_requests (dict): Count per VisitStatus.
                - buy_requests (dict): Count per BuyRequestStatus.
                - sell_requests (dict): Count per SellRequestStatus.
                - offices (int)
        """
        return {
            'projects': Project.objects.count(),
            'plots': _count_by(Plot.objects.all(), 'status', PropertyStatus),
            'lands': _count_by(Land.objects.all(), 'status', PropertyStatus),
            'users': _count_by(User.objects.all(), 'role', UserRole),
            'visit_requests': _count_by(VisitRequest.objects.all(), 'status', VisitStatus),
            'buy_requests': _count_by(BuyRequest.objects.all(), 'status', BuyRequestStatus),
            'sell_requests': _count_by(SellRequest.objects.all(), 'status', SellRequestStatus),
            'offices': Office.objects.count(),
        }
