import datetime

import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from apps.accounts.models import User, UserRole
from apps.inventory.models import Project, Plot, Land, PropertyStatus


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
def superadmin(db):
    return User.objects.create_user(email='super@example.com', name='Super', role=UserRole.SUPERADMIN)


@pytest.fixture
def admin(db):
    return User.objects.create_user(email='admin@example.com', name='Admin', role=UserRole.ADMIN)


@pytest.fixture
def client_user(db):
    return User.objects.create_user(email='client@example.com', name='Client', role=UserRole.CLIENT)


@pytest.fixture
def plot(db):
    project = Project.objects.create(name='Green Valley', location='North Hills')
    return Plot.objects.create(
        project=project,
        title='Plot A1',
        dimension='30x40',
        price='500000.00',
        price_label='5 Lakh',
        location='North Hills',
        latitude=12.97,
        longitude=77.59,
        facing='East',
        description='Corner plot',
        total_area=1200,
    )


def sold_on(day):
    """Midday UTC on ``day``, clear of month boundaries in any timezone."""
    return datetime.datetime(day.year, day.month, day.day, 12, tzinfo=datetime.timezone.utc)


@pytest.fixture
def make_sold_land(plot, client_user):
    """Return a factory for SOLD lands with a given price and sale date."""
    counter = iter(range(1, 100))

    def make(price, day):
        return Land.objects.create(
            plot=plot,
            number=f'L-{next(counter)}',
            size='1200 sqft',
            price=price,
            status=PropertyStatus.SOLD,
            owner=client_user,
            sold_at=sold_on(day),
        )
    return make
