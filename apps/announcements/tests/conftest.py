import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from apps.accounts.models import User, UserRole
from apps.announcements.models import Notification, BannerAd


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
def client_user(db):
    return User.objects.create_user(email='client@example.com', name='Client', role=UserRole.CLIENT)


@pytest.fixture
def other_client(db):
    return User.objects.create_user(email='client2@example.com', name='Client Two', role=UserRole.CLIENT)


@pytest.fixture
def inactive_client(db):
    return User.objects.create_user(
        email='gone@example.com',
        name='Gone',
        role=UserRole.CLIENT,
        is_active=False,
    )


@pytest.fixture
def notification(client_user):
    return Notification.objects.create(user=client_user, title='Welcome', message='Your plot is ready')


@pytest.fixture
def active_banner(db):
    return BannerAd.objects.create(
        title='Festive offer',
        image_url='https://cdn.example.com/banners/festive.png',
    )


@pytest.fixture
def inactive_banner(db):
    return BannerAd.objects.create(
        title='Old offer',
        image_url='https://cdn.example.com/banners/old.png',
        is_active=False,
    )
