import pytest
from datetime import timedelta
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from apps.accounts.models import User, UserRole
from apps.inventory.models import Project, Plot
from apps.visits.models import VisitRequest, VisitStatus


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
    return User.objects.create_user(email='admin@example.com', name='Admin', role=UserRole.ADMIN)


@pytest.fixture
def manager(db):
    return User.objects.create_user(email='manager@example.com', name='Manager', role=UserRole.MANAGER)


@pytest.fixture
def other_manager(db):
    return User.objects.create_user(email='manager2@example.com', name='Manager Two', role=UserRole.MANAGER)


@pytest.fixture
def visitor(db):
    """A signed-in guest who requests visits."""
    return User.objects.create_user(email='visitor@example.com', name='Visitor')


@pytest.fixture
def other_visitor(db):
    return User.objects.create_user(email='other@example.com', name='Other Visitor')


# =============================================================================
# Property and visits
# =============================================================================

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
def tomorrow():
    return timezone.localdate() + timedelta(days=1)


@pytest.fixture
def visit_data(plot, tomorrow):
    """Valid request body for a visit request."""
    return {
        'name': 'Visitor',
        'email': 'visitor@example.com',
        'phone': '+15550100',
        'date': tomorrow.isoformat(),
        'time': '10:30',
        'plot': str(plot.id),
    }


@pytest.fixture
def pending_visit(plot, visitor, tomorrow):
    return VisitRequest.objects.create(
        user=visitor,
        plot=plot,
        name='Visitor',
        email=visitor.email,
        phone='+15550100',
        date=tomorrow,
        time='10:30',
    )


@pytest.fixture
def approved_visit(pending_visit):
    pending_visit.status = VisitStatus.APPROVED
    pending_visit.approved_at = timezone.now()
    pending_visit.save()
    return pending_visit
