import datetime

import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from apps.accounts.models import User, UserRole
from apps.staff.models import Office, LeaveRequest


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def auth_client():
    """Return a factory for API clients authenticated as a given user."""
    def make(user):
        client = APIClient()
        refresh = RefreshToken.for_user(user)
        client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
        return client
    return make


@pytest.fixture
def admin(db):
    return User.objects.create_user(email='admin@example.com', name='Admin', role=UserRole.ADMIN)


@pytest.fixture
def manager(db):
    return User.objects.create_user(email='manager@example.com', name='Manager', role=UserRole.MANAGER)


@pytest.fixture
def other_manager(db):
    return User.objects.create_user(email='manager2@example.com', name='Manager Two', role=UserRole.MANAGER)


@pytest.fixture
def client_user(db):
    return User.objects.create_user(email='client@example.com', name='Client', role=UserRole.CLIENT)


@pytest.fixture
def office(db):
    return Office.objects.create(name='Downtown', latitude=12.97, longitude=77.59)


@pytest.fixture
def other_office(db):
    return Office.objects.create(name='Airport Road')


@pytest.fixture
def leave(manager):
    """A pending leave request of ``manager``."""
    return LeaveRequest.objects.create(
        manager=manager,
        start_date=datetime.date(2026, 3, 2),
        end_date=datetime.date(2026, 3, 6),
        reason='Family trip',
    )
