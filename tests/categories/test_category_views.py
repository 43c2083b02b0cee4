"""
API tests for categories.
"""
import pytest

from modules.categories.models import CategoryModel


pytestmark = pytest.mark.django_db

CATEGORY_URL = '/api/category/'


@pytest.fixture
def category():
    return CategoryModel.objects.create(name='Books')


def test_list_is_public(api_client, category):
    CategoryModel.objects.create(name='Audio')

    response = api_client.get(f'{CATEGORY_URL}categories/')

    assert response.status_code == 200
    assert [row['name'] for row in response.data] == ['Audio', 'Books']


def test_create(admin_api_client):
    response = admin_api_client.post(CATEGORY_URL, {'name': '  Garden '}, format='json')

    assert response.status_code == 201
    assert response.data['name'] == 'Garden'


def test_create_blank_name(admin_api_client):
    response = admin_api_client.post(CATEGORY_URL, {'name': ''}, format='json')

    assert response.status_code == 400
    assert response.data['code'] == 'INVALID_REQUEST'


def test_create_duplicate_name(admin_api_client, category):
    response = admin_api_client.post(CATEGORY_URL, {'name': 'books'}, format='json')

    assert response.status_code == 400
    assert response.data['code'] == 'BUSINESS_RULE_VIOLATION'


def test_create_requires_admin(authenticated_client):
    response = authenticated_client.post(CATEGORY_URL, {'name': 'Toys'}, format='json')

    assert response.status_code == 403


def test_rename(admin_api_client, category):
    response = admin_api_client.put(f'{CATEGORY_URL}{category.id}/', {'name': 'Novels'}, format='json')

    assert response.status_code == 200
    assert response.data['name'] == 'Novels'


def test_delete(admin_api_client, api_client, category):
    response = admin_api_client.delete(f'{CATEGORY_URL}{category.id}/')

    assert response.status_code == 200
    assert api_client.get(f'{CATEGORY_URL}{category.id}/').status_code == 404


def test_missing_category(api_client):
    response = api_client.get(f'{CATEGORY_URL}777/')

    assert response.status_code == 404
    assert response.data['code'] == 'CATEGORY_NOT_FOUND'
