import pytest
from django.urls import reverse
from rest_framework import status

from apps.accounts.models import User, UserRole
from apps.cameras.models import Camera, LandCamera


# =============================================================================
# Login Tests
# =============================================================================

@pytest.mark.django_db
class TestLogin:
    """Tests for POST /api/auth/login/"""

    def test_login_success(self, api_client, client_user):
        """Successfully login with valid credentials."""
        url = reverse('accounts:login')
        response = api_client.post(url, {
            'email': client_user.email,
            'password': 'TestPass123!',
        })

        assert response.status_code == status.HTTP_200_OK
        assert 'access' in response.data['tokens']
        assert 'refresh' in response.data['tokens']
        assert response.data['user']['email'] == client_user.email
        assert response.data['user']['role'] == UserRole.CLIENT

    def test_login_is_case_insensitive_on_email(self, api_client, client_user):
        url = reverse('accounts:login')
        response = api_client.post(url, {
            'email': 'CLIENT@example.com',
            'password': 'TestPass123!',
        })

        assert response.status_code == status.HTTP_200_OK

    def test_login_wrong_password(self, api_client, client_user):
        """Login fails with wrong password."""
        url = reverse('accounts:login')
        response = api_client.post(url, {
            'email': client_user.email,
            'password': 'WrongPass123!',
        })

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert 'error' in response.data

    def test_login_unknown_email(self, api_client, db):
        url = reverse('accounts:login')
        response = api_client.post(url, {
            'email': 'nobody@example.com',
            'password': 'TestPass123!',
        })

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_login_inactive_account(self, api_client, user_inactive):
        """Inactive accounts get 403."""
        url = reverse('accounts:login')
        response = api_client.post(url, {
            'email': user_inactive.email,
            'password': 'TestPass123!',
        })

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_login_clerk_account_without_password(self, api_client, db):
        """Accounts mirrored from Clerk are told to sign in there."""
        User.objects.create_user(
            email='mirrored@example.com',
            name='Mirrored User',
            clerk_id='user_mirrored',
        )

        url = reverse('accounts:login')
        response = api_client.post(url, {
            'email': 'mirrored@example.com',
            'password': 'anything',
        })

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert 'Clerk' in response.data['error']

    def test_login_missing_fields(self, api_client, db):
        url = reverse('accounts:login')
        response = api_client.post(url, {'email': 'client@example.com'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestCurrentUser:
    """Tests for GET /api/auth/me/"""

    def test_me_authenticated(self, auth_client, manager):
        response = auth_client(manager).get(reverse('accounts:me'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['email'] == manager.email
        assert response.data['role'] == UserRole.MANAGER

    def test_me_unauthenticated(self, api_client):
        response = api_client.get(reverse('accounts:me'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


# =============================================================================
# User Management Tests
# =============================================================================

@pytest.mark.django_db
class TestUserList:
    """Tests for GET /api/users/"""

    def test_admin_lists_users(self, auth_client, admin, manager, client_user):
        response = auth_client(admin).get(reverse('users:user-list'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 3

    def test_filter_by_role(self, auth_client, admin, manager, client_user):
        url = reverse('users:user-list')
        response = auth_client(admin).get(url, {'role': 'MANAGER'})

        assert response.status_code == status.HTTP_200_OK
        emails = [u['email'] for u in response.data['results']]
        assert emails == [manager.email]

    def test_invalid_role_filter(self, auth_client, admin):
        url = reverse('users:user-list')
        response = auth_client(admin).get(url, {'role': 'OWNER'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_non_admin_forbidden(self, auth_client, manager):
        response = auth_client(manager).get(reverse('users:user-list'))

        assert response.status_code == status.HTTP_403_FORBIDDEN


@pytest.mark.django_db
class TestUserCreate:
    """Tests for POST /api/users/"""

    def payload(self, **overrides):
        data = {
            'name': 'New Client',
            'email': 'new@example.com',
            'role': 'CLIENT',
            'clerk_id': 'user_new',
        }
        data.update(overrides)
        return data

    def test_create_user(self, auth_client, admin):
        url = reverse('users:user-list')
        response = auth_client(admin).post(url, self.payload(), format='json')

        assert response.status_code == status.HTTP_201_CREATED
        user = User.objects.get(email='new@example.com')
        assert user.role == UserRole.CLIENT
        assert user.clerk_id == 'user_new'

    def test_missing_required_field(self, auth_client, admin):
        data = self.payload()
        del data['clerk_id']
        response = auth_client(admin).post(reverse('users:user-list'), data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'clerk_id' in response.data

    def test_invalid_email(self, auth_client, admin):
        url = reverse('users:user-list')
        response = auth_client(admin).post(url, self.payload(email='not-an-email'), format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'email' in response.data

    def test_invalid_role(self, auth_client, admin):
        url = reverse('users:user-list')
        response = auth_client(admin).post(url, self.payload(role='OWNER'), format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_duplicate_email(self, auth_client, admin, client_user):
        url = reverse('users:user-list')
        response = auth_client(admin).post(url, self.payload(email=client_user.email), format='json')

        assert response.status_code == status.HTTP_409_CONFLICT

    def test_duplicate_clerk_id(self, auth_client, admin, client_user):
        url = reverse('users:user-list')
        response = auth_client(admin).post(
            url, self.payload(clerk_id=client_user.clerk_id), format='json'
        )

        assert response.status_code == status.HTTP_409_CONFLICT

    def test_admin_cannot_create_admin(self, auth_client, admin):
        """Only super admins may grant admin roles."""
        url = reverse('users:user-list')
        response = auth_client(admin).post(url, self.payload(role='ADMIN'), format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert not User.objects.filter(email='new@example.com').exists()

    def test_superadmin_can_create_admin(self, auth_client, superadmin):
        url = reverse('users:user-list')
        response = auth_client(superadmin).post(url, self.payload(role='ADMIN'), format='json')

        assert response.status_code == status.HTTP_201_CREATED


@pytest.mark.django_db
class TestUserUpdate:
    """Tests for PATCH/PUT/DELETE /api/users/{id}/"""

    def test_admin_updates_user(self, auth_client, admin, client_user):
        url = reverse('users:user-detail', kwargs={'pk': client_user.id})
        response = auth_client(admin).patch(url, {'name': 'Renamed', 'role': 'MANAGER'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        client_user.refresh_from_db()
        assert client_user.name == 'Renamed'
        assert client_user.role == UserRole.MANAGER

    def test_user_updates_own_phone(self, auth_client, client_user):
        url = reverse('users:user-detail', kwargs={'pk': client_user.id})
        response = auth_client(client_user).patch(url, {'phone': '+15550100'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        client_user.refresh_from_db()
        assert client_user.phone == '+15550100'

    def test_user_cannot_change_own_role(self, auth_client, client_user):
        url = reverse('users:user-detail', kwargs={'pk': client_user.id})
        response = auth_client(client_user).patch(url, {'role': 'ADMIN'}, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN
        client_user.refresh_from_db()
        assert client_user.role == UserRole.CLIENT

    def test_user_cannot_update_someone_else(self, auth_client, client_user, guest):
        url = reverse('users:user-detail', kwargs={'pk': guest.id})
        response = auth_client(client_user).patch(url, {'name': 'Hacked'}, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_email_taken_by_other_user(self, auth_client, admin, client_user, guest):
        url = reverse('users:user-detail', kwargs={'pk': client_user.id})
        response = auth_client(admin).patch(url, {'email': guest.email}, format='json')

        assert response.status_code == status.HTTP_409_CONFLICT

    def test_keeping_own_email_is_allowed(self, auth_client, admin, client_user):
        url = reverse('users:user-detail', kwargs={'pk': client_user.id})
        response = auth_client(admin).patch(url, {'email': client_user.email}, format='json')

        assert response.status_code == status.HTTP_200_OK

    def test_invalid_role(self, auth_client, admin, client_user):
        url = reverse('users:user-detail', kwargs={'pk': client_user.id})
        response = auth_client(admin).patch(url, {'role': 'KING'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_delete_user(self, auth_client, admin, client_user):
        url = reverse('users:user-detail', kwargs={'pk': client_user.id})
        response = auth_client(admin).delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not User.objects.filter(id=client_user.id).exists()

    def test_delete_unknown_user(self, auth_client, admin):
        url = reverse('users:user-detail', kwargs={'pk': '00000000-0000-0000-0000-000000000000'})
        response = auth_client(admin).delete(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
class TestUserByClerkId:
    """Tests for GET /api/users/by-clerk/{clerk_id}/"""

    def test_profile_includes_owned_property_and_cameras(
        self, auth_client, client_user, owned_plot
    ):
        Camera.objects.create(plot=owned_plot, ip_address='10.0.0.1', label='Gate')
        land = owned_plot.lands.get()
        LandCamera.objects.create(land=land, ip_address='10.0.0.2')

        url = reverse('users:user-by-clerk', kwargs={'clerk_id': client_user.clerk_id})
        response = auth_client(client_user).get(url)

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data['owned_plots']) == 1
        assert response.data['owned_plots'][0]['cameras'][0]['ip_address'] == '10.0.0.1'
        assert len(response.data['owned_lands']) == 1
        assert response.data['owned_lands'][0]['cameras'][0]['ip_address'] == '10.0.0.2'

    def test_admin_can_view_any_profile(self, auth_client, admin, client_user):
        url = reverse('users:user-by-clerk', kwargs={'clerk_id': client_user.clerk_id})
        response = auth_client(admin).get(url)

        assert response.status_code == status.HTTP_200_OK

    def test_other_user_forbidden(self, auth_client, guest, client_user):
        url = reverse('users:user-by-clerk', kwargs={'clerk_id': client_user.clerk_id})
        response = auth_client(guest).get(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_unknown_clerk_id(self, auth_client, admin):
        url = reverse('users:user-by-clerk', kwargs={'clerk_id': 'user_missing'})
        response = auth_client(admin).get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
class TestAllUsersOverview:
    """Tests for GET /api/users/all/"""

    def test_overview_counts(self, auth_client, admin, client_user, owned_plot):
        response = auth_client(admin).get(reverse('users:user-all'))

        assert response.status_code == status.HTTP_200_OK
        row = next(u for u in response.data if u['email'] == client_user.email)
        assert row['owned_plots_count'] == 1
        assert row['visit_requests_count'] == 0
        assert row['owned_plots'][0]['title'] == 'Plot A1'

    def test_manager_forbidden(self, auth_client, manager):
        response = auth_client(manager).get(reverse('users:user-all'))

        assert response.status_code == status.HTTP_403_FORBIDDEN


# =============================================================================
# Admin Account Tests
# =============================================================================

@pytest.mark.django_db
class TestAdminAccounts:
    """Tests for /api/admins/"""

    def test_list_only_admin_roles(self, auth_client, admin, superadmin, client_user):
        response = auth_client(admin).get(reverse('admins:admin-list'))

        assert response.status_code == status.HTTP_200_OK
        roles = {u['role'] for u in response.data['results']}
        assert roles == {UserRole.ADMIN, UserRole.SUPERADMIN}

    def test_admin_cannot_create_admin(self, auth_client, admin):
        response = auth_client(admin).post(reverse('admins:admin-list'), {
            'name': 'Another',
            'email': 'another@example.com',
            'role': 'ADMIN',
            'clerk_id': 'user_another',
        }, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_superadmin_creates_admin(self, auth_client, superadmin):
        response = auth_client(superadmin).post(reverse('admins:admin-list'), {
            'name': 'Another',
            'email': 'another@example.com',
            'role': 'ADMIN',
            'clerk_id': 'user_another',
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert User.objects.get(email='another@example.com').role == UserRole.ADMIN

    def test_create_rejects_non_admin_role(self, auth_client, superadmin):
        response = auth_client(superadmin).post(reverse('admins:admin-list'), {
            'name': 'Another',
            'email': 'another@example.com',
            'role': 'CLIENT',
            'clerk_id': 'user_another',
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_superadmin_promotes_admin(self, auth_client, superadmin, admin):
        url = reverse('admins:admin-detail', kwargs={'pk': admin.id})
        response = auth_client(superadmin).patch(url, {'role': 'SUPERADMIN'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        admin.refresh_from_db()
        assert admin.role == UserRole.SUPERADMIN

    def test_superadmin_deletes_admin(self, auth_client, superadmin, admin):
        url = reverse('admins:admin-detail', kwargs={'pk': admin.id})
        response = auth_client(superadmin).delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not User.objects.filter(id=admin.id).exists()

    def test_admin_cannot_delete_admin(self, auth_client, admin, superadmin):
        url = reverse('admins:admin-detail', kwargs={'pk': superadmin.id})
        response = auth_client(admin).delete(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_client_account_is_not_an_admin(self, auth_client, superadmin, client_user):
        url = reverse('admins:admin-detail', kwargs={'pk': client_user.id})
        response = auth_client(superadmin).delete(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
