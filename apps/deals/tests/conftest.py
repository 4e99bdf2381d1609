import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from apps.accounts.models import User, UserRole
from apps.inventory.models import Project, Plot, Land, PropertyStatus
from apps.deals.models import BuyRequest, SellRequest


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
def buyer(db):
    return User.objects.create_user(email='buyer@example.com', name='Buyer', phone='+15550101')


@pytest.fixture
def owner(db):
    """A client who owns the sold land."""
    return User.objects.create_user(email='owner@example.com', name='Owner', role=UserRole.CLIENT)


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


@pytest.fixture
def available_land(plot):
    return Land.objects.create(plot=plot, number='L-1', size='1200 sqft', price='200000.00')


@pytest.fixture
def owned_land(plot, owner):
    return Land.objects.create(
        plot=plot,
        number='L-2',
        size='1200 sqft',
        price='200000.00',
        status=PropertyStatus.SOLD,
        owner=owner,
    )


@pytest.fixture
def buy_request(buyer, available_land):
    return BuyRequest.objects.create(user=buyer, land=available_land, message='Interested')


@pytest.fixture
def sell_request(owner, owned_land):
    return SellRequest.objects.create(
        plot=owned_land.plot,
        land=owned_land,
        user=owner,
        asking_price='250000.00',
        terms_accepted=True,
        potential_profit='50000.00',
        profit_percentage='25.00',
    )
