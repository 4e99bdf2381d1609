import pytest
from django.urls import reverse
from rest_framework import status

from apps.inventory.models import Project, Plot, Land, PropertyStatus
from apps.inventory.services import QRCodeGenerator


# =============================================================================
# Project Tests
# =============================================================================

@pytest.mark.django_db
class TestProjects:
    """Tests for /api/projects/"""

    def test_list_is_public_and_includes_plots(self, api_client, project, plot):
        response = api_client.get(reverse('inventory:project-list'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 1
        assert response.data['results'][0]['plots'][0]['title'] == 'Plot A1'

    def test_retrieve_unknown_project(self, api_client, db):
        url = reverse('inventory:project-detail', kwargs={'pk': '00000000-0000-0000-0000-000000000000'})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_admin_creates_project(self, auth_client, admin):
        response = auth_client(admin).post(reverse('inventory:project-list'), {
            'name': 'Sunrise Meadows',
            'location': 'East Ridge',
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert Project.objects.filter(name='Sunrise Meadows').exists()

    def test_non_admin_cannot_create(self, auth_client, manager):
        response = auth_client(manager).post(reverse('inventory:project-list'), {
            'name': 'Sunrise Meadows',
            'location': 'East Ridge',
        }, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_anonymous_cannot_create(self, api_client, db):
        response = api_client.post(reverse('inventory:project-list'), {
            'name': 'Sunrise Meadows',
            'location': 'East Ridge',
        }, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_admin_updates_project(self, auth_client, admin, project):
        url = reverse('inventory:project-detail', kwargs={'pk': project.id})
        response = auth_client(admin).patch(url, {'location': 'Hilltop'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        project.refresh_from_db()
        assert project.location == 'Hilltop'

    def test_delete_empty_project(self, auth_client, admin, other_project):
        url = reverse('inventory:project-detail', kwargs={'pk': other_project.id})
        response = auth_client(admin).delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Project.objects.filter(id=other_project.id).exists()

    def test_cannot_delete_project_with_plots(self, auth_client, admin, project, plot):
        url = reverse('inventory:project-detail', kwargs={'pk': project.id})
        response = auth_client(admin).delete(url)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Cannot delete project with existing plots'
        assert Project.objects.filter(id=project.id).exists()

    def test_delete_unknown_project(self, auth_client, admin):
        url = reverse('inventory:project-detail', kwargs={'pk': '00000000-0000-0000-0000-000000000000'})
        response = auth_client(admin).delete(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND


# =============================================================================
# Plot Tests
# =============================================================================

@pytest.mark.django_db
class TestPlots:
    """Tests for /api/plots/"""

    def test_list_all_plots(self, api_client, plot):
        response = api_client.get(reverse('inventory:plot-list'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 1

    def test_filter_by_project(self, api_client, plot, other_project):
        url = reverse('inventory:plot-list')

        response = api_client.get(url, {'project': str(other_project.id)})
        assert response.data['count'] == 0

        response = api_client.get(url, {'project': str(plot.project_id)})
        assert response.data['count'] == 1

    def test_create_plot_generates_qr(self, auth_client, admin, plot_data):
        response = auth_client(admin).post(reverse('inventory:plot-list'), plot_data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['qr_url'].startswith(QRCodeGenerator.DATA_URL_PREFIX)
        plot = Plot.objects.get(id=response.data['id'])
        assert plot.qr_url == response.data['qr_url']
        assert plot.amenities == ['Water', 'Power']

    def test_create_plot_unknown_project(self, auth_client, admin, plot_data):
        plot_data['project'] = '00000000-0000-0000-0000-000000000000'
        response = auth_client(admin).post(reverse('inventory:plot-list'), plot_data, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert not Plot.objects.exists()

    def test_create_plot_negative_price(self, auth_client, admin, plot_data):
        plot_data['price'] = '-1'
        response = auth_client(admin).post(reverse('inventory:plot-list'), plot_data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'price' in response.data

    def test_create_plot_invalid_status(self, auth_client, admin, plot_data):
        plot_data['status'] = 'RESERVED'
        response = auth_client(admin).post(reverse('inventory:plot-list'), plot_data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_plot_invalid_image_url(self, auth_client, admin, plot_data):
        plot_data['image_urls'] = ['not a url']
        response = auth_client(admin).post(reverse('inventory:plot-list'), plot_data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'image_urls' in response.data

    def test_create_plot_blank_title(self, auth_client, admin, plot_data):
        plot_data['title'] = ''
        response = auth_client(admin).post(reverse('inventory:plot-list'), plot_data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_update_plot(self, auth_client, admin, plot):
        url = reverse('inventory:plot-detail', kwargs={'pk': plot.id})
        response = auth_client(admin).patch(url, {'price_label': '6 Lakh'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        plot.refresh_from_db()
        assert plot.price_label == '6 Lakh'
        assert plot.qr_url

    def test_move_plot_to_other_project(self, auth_client, admin, plot, other_project):
        url = reverse('inventory:plot-detail', kwargs={'pk': plot.id})
        response = auth_client(admin).patch(url, {'project': str(other_project.id)}, format='json')

        assert response.status_code == status.HTTP_200_OK
        plot.refresh_from_db()
        assert plot.project == other_project

    def test_delete_plot(self, auth_client, admin, plot, land):
        url = reverse('inventory:plot-detail', kwargs={'pk': plot.id})
        response = auth_client(admin).delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Land.objects.filter(id=land.id).exists()


# =============================================================================
# Land Tests
# =============================================================================

@pytest.mark.django_db
class TestLands:
    """Tests for /api/lands/"""

    def test_list_requires_plot(self, api_client, land):
        response = api_client.get(reverse('inventory:land-list'))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'Plot ID is required' in str(response.data['plot'])

    def test_list_newest_first(self, api_client, land, sold_land):
        url = reverse('inventory:land-list')
        response = api_client.get(url, {'plot': str(land.plot_id)})

        assert response.status_code == status.HTTP_200_OK
        numbers = [row['number'] for row in response.data['results']]
        assert numbers == ['L-2', 'L-1']

    def test_create_land(self, auth_client, admin, plot):
        response = auth_client(admin).post(reverse('inventory:land-list'), {
            'plot': str(plot.id),
            'number': 'L-9',
            'size': '900 sqft',
            'price': '90000',
            'status': 'AVAILABLE',
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert plot.lands.filter(number='L-9').exists()

    def test_create_land_zero_price(self, auth_client, admin, plot):
        response = auth_client(admin).post(reverse('inventory:land-list'), {
            'plot': str(plot.id),
            'number': 'L-9',
            'size': '900 sqft',
            'price': '0',
            'status': 'AVAILABLE',
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_land_unknown_plot(self, auth_client, admin, db):
        response = auth_client(admin).post(reverse('inventory:land-list'), {
            'plot': '00000000-0000-0000-0000-000000000000',
            'number': 'L-9',
            'size': '900 sqft',
            'price': '90000',
            'status': 'AVAILABLE',
        }, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_update_land_status(self, auth_client, admin, land):
        url = reverse('inventory:land-detail', kwargs={'pk': land.id})
        response = auth_client(admin).patch(url, {'status': 'ADVANCE'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        land.refresh_from_db()
        assert land.status == PropertyStatus.ADVANCE

    def test_delete_land(self, auth_client, admin, land):
        url = reverse('inventory:land-detail', kwargs={'pk': land.id})
        response = auth_client(admin).delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT

    def test_client_cannot_delete_land(self, auth_client, client_user, land):
        url = reverse('inventory:land-detail', kwargs={'pk': land.id})
        response = auth_client(client_user).delete(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN


@pytest.mark.django_db
class TestAssignLand:
    """Tests for POST /api/lands/{id}/assign/"""

    def test_assign_to_client(self, auth_client, admin, land, client_user):
        url = reverse('inventory:land-assign', kwargs={'pk': land.id})
        response = auth_client(admin).post(url, {'client': str(client_user.id)}, format='json')

        assert response.status_code == status.HTTP_200_OK
        land.refresh_from_db()
        assert land.owner == client_user
        assert land.status == PropertyStatus.SOLD
        assert land.sold_at is not None

    def test_assign_to_non_client(self, auth_client, admin, land, guest):
        url = reverse('inventory:land-assign', kwargs={'pk': land.id})
        response = auth_client(admin).post(url, {'client': str(guest.id)}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        land.refresh_from_db()
        assert land.owner is None

    def test_assign_unknown_client(self, auth_client, admin, land):
        url = reverse('inventory:land-assign', kwargs={'pk': land.id})
        response = auth_client(admin).post(
            url, {'client': '00000000-0000-0000-0000-000000000000'}, format='json'
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_manager_cannot_assign(self, auth_client, manager, land, client_user):
        url = reverse('inventory:land-assign', kwargs={'pk': land.id})
        response = auth_client(manager).post(url, {'client': str(client_user.id)}, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN


@pytest.mark.django_db
class TestAssignedAndOwnedLands:
    """Tests for GET /api/lands/assigned/ and GET /api/lands/owned/"""

    def test_assigned_lands_flattened(self, auth_client, manager, land, sold_land):
        response = auth_client(manager).get(reverse('inventory:land-assigned'))

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 1
        row = response.data[0]
        assert row['land_number'] == 'L-2'
        assert row['client_email'] == 'client@example.com'
        assert row['plot_title'] == 'Plot A1'
        assert row['assigned_at'] is not None

    def test_assigned_falls_back_to_unknown(self, auth_client, admin, sold_land):
        sold_land.owner.name = ''
        sold_land.owner.save()

        response = auth_client(admin).get(reverse('inventory:land-assigned'))

        assert response.data[0]['client_name'] == 'Unknown'

    def test_assigned_forbidden_for_clients(self, auth_client, client_user):
        response = auth_client(client_user).get(reverse('inventory:land-assigned'))

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_owned_lands(self, auth_client, client_user, land, sold_land):
        response = auth_client(client_user).get(reverse('inventory:land-owned'))

        assert response.status_code == status.HTTP_200_OK
        assert [row['number'] for row in response.data] == ['L-2']
        assert response.data[0]['plot']['title'] == 'Plot A1'

    def test_owned_requires_client_role(self, auth_client, guest):
        response = auth_client(guest).get(reverse('inventory:land-owned'))

        assert response.status_code == status.HTTP_403_FORBIDDEN


@pytest.mark.django_db
class TestMalformedInventoryIds:
    """Tests for inventory routes called with an id that is not a UUID"""

    def test_project_delete(self, auth_client, admin):
        response = auth_client(admin).delete('/api/projects/not-a-uuid/')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_land_assign(self, auth_client, admin, client_user):
        response = auth_client(admin).post(
            '/api/lands/not-a-uuid/assign/', {'client': str(client_user.id)}, format='json'
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
