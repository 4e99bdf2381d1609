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
def admin(db):
    return User.objects.create_user(email='admin@example.com', name='Admin', role=UserRole.ADMIN)


@pytest.fixture
def owner(db):
    """A client who owns the plot and the sold land."""
    return User.objects.create_user(email='owner@example.com', name='Owner', role=UserRole.CLIENT)


@pytest.fixture
def other_client(db):
    return User.objects.create_user(email='other@example.com', name='Other', role=UserRole.CLIENT)


@pytest.fixture
def project(db):
    return Project.objects.create(name='Green Valley', location='North Hills')


def make_plot(project, **extra):
    fields = {
        'title': 'Plot A1',
        'dimension': '30x40',
        'price': '500000.00',
        'price_label': '5 Lakh',
        'location': 'North Hills',
        'latitude': 12.97,
        'longitude': 77.59,
        'facing': 'East',
        'description': 'Corner plot',
        'total_area': 1200,
    }
    fields.update(extra)
    return Plot.objects.create(project=project, **fields)


@pytest.fixture
def owned_plot(project, owner):
    return make_plot(project, status=PropertyStatus.SOLD, owner=owner)


@pytest.fixture
def unowned_plot(project):
    return make_plot(project, title='Plot B1')


@pytest.fixture
def sold_land(owned_plot, owner):
    return Land.objects.create(
        plot=owned_plot,
        number='L-1',
        size='1200 sqft',
        price='250000.00',
        status=PropertyStatus.SOLD,
        owner=owner,
    )


@pytest.fixture
def available_land(unowned_plot):
    return Land.objects.create(
        plot=unowned_plot,
        number='L-5',
        size='600 sqft',
        price='120000.00',
    )
