import pytest
from django.urls import reverse
from rest_framework import status

from apps.coffees.models import CoffeeRecord


@pytest.mark.django_db
class TestCoffeeCreate:
    """Tests for POST /api/coffees"""

    def test_create_coffee(self, api_client):
        url = reverse('coffees:coffee-list')
        response = api_client.post(url, {'name': 'Cappuccino', 'price': 65.0}, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['name'] == 'Cappuccino'
        assert response.data['price'] == 65.0
        assert response.data['orders'] == []

    def test_create_coffee_empty_name(self, api_client):
        url = reverse('coffees:coffee-list')
        response = api_client.post(url, {'name': '', 'price': 65.0}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['code'] == 'no_valid_name'

    def test_create_coffee_negative_price(self, api_client):
        url = reverse('coffees:coffee-list')
        response = api_client.post(url, {'name': 'Cappuccino', 'price': -65}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['code'] == 'no_valid_price'


@pytest.mark.django_db
class TestCoffeeRead:
    """Tests for GET /api/coffees and /api/coffees/{id}"""

    def test_list_coffees(self, api_client, espresso, latte, order):
        url = reverse('coffees:coffee-list')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert [c['name'] for c in response.data] == ['Espresso', 'Latte']
        assert response.data[0]['orders'][0]['id'] == order.id

    def test_list_first_page(self, api_client, espresso, latte):
        url = reverse('coffees:coffee-list')
        response = api_client.get(url, {'page': 0, 'limit': 1})

        assert [c['id'] for c in response.data] == [espresso.id]

    def test_list_invalid_page_type(self, api_client):
        url = reverse('coffees:coffee-list')
        response = api_client.get(url, {'page': 'first'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_retrieve_missing_coffee(self, api_client):
        url = reverse('coffees:coffee-detail', kwargs={'pk': 404})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['code'] == 'coffee_not_found'


@pytest.mark.django_db
class TestCoffeeUpdate:
    """Tests for PUT /api/coffees/{id}"""

    def test_update_coffee(self, api_client, latte, order):
        url = reverse('coffees:coffee-detail', kwargs={'pk': latte.id})
        response = api_client.put(url, {
            'name': 'Oat latte',
            'price': 60.0,
            'orderIdList': [order.id],
        }, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['name'] == 'Oat latte'
        assert response.data['orders'][0]['price'] == 192.0

    def test_update_duplicated_orders(self, api_client, latte, order):
        url = reverse('coffees:coffee-detail', kwargs={'pk': latte.id})
        response = api_client.put(url, {
            'name': 'Latte',
            'price': 50.0,
            'orderIdList': [order.id, order.id],
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['code'] == 'duplicated_elements'


@pytest.mark.django_db
class TestCoffeeDelete:
    """Tests for DELETE /api/coffees/{id}"""

    def test_delete_coffee(self, api_client, espresso):
        url = reverse('coffees:coffee-detail', kwargs={'pk': espresso.id})
        response = api_client.delete(url)

        assert response.status_code == status.HTTP_200_OK
        assert not CoffeeRecord.objects.filter(id=espresso.id).exists()

    def test_delete_referenced_coffee(self, api_client, espresso, order):
        url = reverse('coffees:coffee-detail', kwargs={'pk': espresso.id})
        response = api_client.delete(url)

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.data['code'] == 'coffee_has_references'
        assert CoffeeRecord.objects.filter(id=espresso.id).exists()
