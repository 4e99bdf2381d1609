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


# =============================================================================
# Users
# =============================================================================

@pytest.fixture
def admin(db):
    return User.objects.create_user(
        email='admin@example.com',
        name='Admin User',
        role=UserRole.ADMIN,
    )


@pytest.fixture
def manager(db):
    return User.objects.create_user(
        email='manager@example.com',
        name='Manager User',
        role=UserRole.MANAGER,
    )


@pytest.fixture
def client_user(db):
    """Create and return a CLIENT account."""
    return User.objects.create_user(
        email='client@example.com',
        name='Client User',
        role=UserRole.CLIENT,
    )


@pytest.fixture
def guest(db):
    return User.objects.create_user(email='guest@example.com', name='Guest User')


# =============================================================================
# Inventory
# =============================================================================

@pytest.fixture
def project(db):
    return Project.objects.create(
        name='Green Valley',
        location='North Hills',
        description='Gated layout with 40 plots',
    )


@pytest.fixture
def other_project(db):
    return Project.objects.create(name='Lake View', location='South Bay')


@pytest.fixture
def plot_data(project):
    """Valid request body for creating a plot."""
    return {
        'project': str(project.id),
        'title': 'Plot A1',
        'dimension': '30x40',
        'price': '500000.00',
        'price_label': '5 Lakh',
        'status': 'AVAILABLE',
        'image_urls': ['https://img.example.com/a1.jpg'],
        'location': 'North Hills',
        'latitude': 12.97,
        'longitude': 77.59,
        'facing': 'East',
        'amenities': ['Water', 'Power'],
        'description': 'Corner plot',
        'map_embed_url': '',
        'total_area': 1200,
    }


@pytest.fixture
def plot(project):
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


@pytest.fixture
def land(plot):
    return Land.objects.create(
        plot=plot,
        number='L-1',
        size='1200 sqft',
        price='250000.00',
        status=PropertyStatus.AVAILABLE,
    )


@pytest.fixture
def sold_land(plot, client_user):
    return Land.objects.create(
        plot=plot,
        number='L-2',
        size='600 sqft',
        price='150000.00',
        status=PropertyStatus.SOLD,
        owner=client_user,
    )
