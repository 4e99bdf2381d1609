import datetime
from decimal import Decimal

import pytest
from django.urls import reverse
from rest_framework import status

from apps.analytics.analytics import AnalyticsQueries
from apps.inventory.models import Land, PropertyStatus

from .conftest import sold_on


# =============================================================================
# Sales Stats Tests
# =============================================================================

@pytest.mark.django_db
class TestSalesByMonth:
    """Tests for AnalyticsQueries.sales_by_month"""

    def test_no_sales(self, plot):
        Land.objects.create(plot=plot, number='L-1', size='1200 sqft', price='100000.00')

        assert AnalyticsQueries.sales_by_month() == []

    def test_groups_by_month_ascending(self, make_sold_land):
        make_sold_land('200000.00', datetime.date(2025, 2, 10))
        make_sold_land('150000.00', datetime.date(2025, 1, 15))
        make_sold_land('100000.00', datetime.date(2025, 1, 20))

        result = AnalyticsQueries.sales_by_month()

        assert result == [
            {'month': '2025-01', 'total_sales': Decimal('250000.00'), 'sales_count': 2},
            {'month': '2025-02', 'total_sales': Decimal('200000.00'), 'sales_count': 1},
        ]

    def test_unsold_lands_are_ignored(self, plot, make_sold_land):
        make_sold_land('150000.00', datetime.date(2025, 1, 15))
        Land.objects.create(
            plot=plot, number='L-99', size='1200 sqft', price='900000.00',
            status=PropertyStatus.ADVANCE
        )

        result = AnalyticsQueries.sales_by_month()

        assert len(result) == 1
        assert result[0]['total_sales'] == Decimal('150000.00')

    def test_year_filter(self, make_sold_land):
        make_sold_land('150000.00', datetime.date(2024, 12, 15))
        make_sold_land('100000.00', datetime.date(2025, 1, 15))

        result = AnalyticsQueries.sales_by_month(year=2025)

        assert [point['month'] for point in result] == ['2025-01']

    def test_falls_back_to_created_at(self, plot, client_user):
        land = Land.objects.create(
            plot=plot, number='L-1', size='1200 sqft', price='120000.00',
            status=PropertyStatus.SOLD, owner=client_user
        )
        Land.objects.filter(id=land.id).update(created_at=sold_on(datetime.date(2024, 6, 15)))

        result = AnalyticsQueries.sales_by_month()

        assert result == [{'month': '2024-06', 'total_sales': Decimal('120000.00'), 'sales_count': 1}]


@pytest.mark.django_db
class TestSalesStatsEndpoint:
    """Tests for GET /api/analytics/sales-stats/"""

    def test_admin_gets_series(self, auth_client, admin, make_sold_land):
        make_sold_land('150000.00', datetime.date(2025, 3, 15))

        response = auth_client(admin).get(reverse('analytics:sales-stats'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data[0]['month'] == '2025-03'
        assert Decimal(response.data[0]['total_sales']) == Decimal('150000.00')
        assert response.data[0]['sales_count'] == 1

    def test_invalid_year(self, auth_client, admin):
        response = auth_client(admin).get(reverse('analytics:sales-stats'), {'year': 'abc'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_client_forbidden(self, auth_client, client_user):
        response = auth_client(client_user).get(reverse('analytics:sales-stats'))

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_requires_login(self, api_client):
        response = api_client.get(reverse('analytics:sales-stats'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


# =============================================================================
# Overview Tests
# =============================================================================

@pytest.mark.django_db
class TestOverview:
    """Tests for GET /api/analytics/overview/"""

    def test_counts(self, auth_client, superadmin, admin, client_user, make_sold_land):
        make_sold_land('150000.00', datetime.date(2025, 3, 15))

        response = auth_client(superadmin).get(reverse('analytics:overview'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['projects'] == 1
        assert response.data['plots']['AVAILABLE'] == 1
        assert response.data['lands'] == {'AVAILABLE': 0, 'ADVANCE': 0, 'SOLD': 1}
        assert response.data['users']['SUPERADMIN'] == 1
        assert response.data['users']['ADMIN'] == 1
        assert response.data['users']['CLIENT'] == 1
        assert response.data['users']['GUEST'] == 0
        assert response.data['offices'] == 0

    def test_empty_statuses_are_zero(self, auth_client, superadmin):
        response = auth_client(superadmin).get(reverse('analytics:overview'))

        assert response.data['visit_requests']['PENDING'] == 0
        assert response.data['buy_requests']['APPROVED'] == 0
        assert response.data['sell_requests']['COMPLETED'] == 0

    def test_admin_forbidden(self, auth_client, admin):
        response = auth_client(admin).get(reverse('analytics:overview'))

        assert response.status_code == status.HTTP_403_FORBIDDEN
