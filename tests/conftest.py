"""
Pytest configuration and fixtures.
"""
from decimal import Decimal

import pytest


@pytest.fixture
def api_client():
    """Create an API client for testing."""
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def user(django_user_model):
    return django_user_model.objects.create_user(
        email='test@example.com',
        username='testuser',
        password='testpass123',
    )


@pytest.fixture
def staff_user(django_user_model):
    return django_user_model.objects.create_user(
        email='admin@example.com',
        username='admin',
        password='adminpass123',
        is_staff=True,
    )


@pytest.fixture
def authenticated_client(api_client, user):
    """Create an authenticated API client."""
    api_client.force_authenticate(user=user)
    return api_client


@pytest.fixture
def admin_api_client(staff_user):
    """Create an API client authenticated as an administrator."""
    from rest_framework.test import APIClient
    client = APIClient()
    client.force_authenticate(user=staff_user)
    return client


@pytest.fixture
def make_product(db):
    """Factory for products with sensible defaults."""
    from modules.products.models import ProductModel

    def _make(name='Widget', price='10.00', count_in_stock=10, **kwargs):
        return ProductModel.objects.create(
            name=name,
            price=Decimal(price),
            count_in_stock=count_in_stock,
            image=kwargs.pop('image', f'/images/{name.lower()}.jpg'),
            **kwargs
        )

    return _make


@pytest.fixture
def shipping_address():
    return {
        'address': '1 Main St',
        'city': 'Springfield',
        'postal_code': '12345',
        'country': 'US',
    }
