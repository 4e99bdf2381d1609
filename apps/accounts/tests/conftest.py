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
def superadmin(db):
    return User.objects.create_user(
        email='super@example.com',
        password='TestPass123!',
        name='Super Admin',
        role=UserRole.SUPERADMIN,
        clerk_id='user_super',
    )


@pytest.fixture
def admin(db):
    return User.objects.create_user(
        email='admin@example.com',
        password='TestPass123!',
        name='Admin User',
        role=UserRole.ADMIN,
        clerk_id='user_admin',
    )


@pytest.fixture
def manager(db):
    return User.objects.create_user(
        email='manager@example.com',
        password='TestPass123!',
        name='Manager User',
        role=UserRole.MANAGER,
        clerk_id='user_manager',
    )


@pytest.fixture
def client_user(db):
    """Create and return a CLIENT account."""
    return User.objects.create_user(
        email='client@example.com',
        password='TestPass123!',
        name='Client User',
        role=UserRole.CLIENT,
        clerk_id='user_client',
    )


@pytest.fixture
def guest(db):
    return User.objects.create_user(
        email='guest@example.com',
        password='TestPass123!',
        name='Guest User',
        clerk_id='user_guest',
    )


@pytest.fixture
def user_inactive(db):
    """Create and return an inactive user."""
    return User.objects.create_user(
        email='inactive@example.com',
        password='TestPass123!',
        name='Inactive User',
        is_active=False,
    )


# =============================================================================
# Owned property
# =============================================================================

@pytest.fixture
def owned_plot(db, client_user):
    """A sold plot owned by client_user, with one land of its own."""
    project = Project.objects.create(name='Green Valley', location='North Hills')
    plot = Plot.objects.create(
        project=project,
        title='Plot A1',
        dimension='30x40',
        price='500000.00',
        price_label='5 Lakh',
        status=PropertyStatus.SOLD,
        location='North Hills',
        latitude=12.97,
        longitude=77.59,
        facing='East',
        description='Corner plot',
        total_area=1200,
        owner=client_user,
    )
    Land.objects.create(
        plot=plot,
        number='L-1',
        size='1200 sqft',
        price='250000.00',
        status=PropertyStatus.SOLD,
        owner=client_user,
    )
    return plot
