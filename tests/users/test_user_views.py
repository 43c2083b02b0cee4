"""
API tests for registration, authentication and user administration.
"""
import pytest

from modules.users.models import UserModel


pytestmark = pytest.mark.django_db

USERS_URL = '/api/users/'


class TestRegistration:

    def test_register(self, api_client):
        response = api_client.post(USERS_URL, {
            'username': 'newbie',
            'email': 'newbie@example.com',
            'password': 'secret123',
        }, format='json')

        assert response.status_code == 201
        assert response.data['email'] == 'newbie@example.com'
        assert response.data['is_admin'] is False
        assert 'password' not in response.data
        assert UserModel.objects.get(email='newbie@example.com').check_password('secret123')

    def test_missing_fields(self, api_client):
        response = api_client.post(USERS_URL, {'email': 'x@example.com'}, format='json')

        assert response.status_code == 400
        assert response.data['code'] == 'INVALID_REQUEST'
        assert response.data['error'] == 'Please fill all fields'

    def test_duplicate_email(self, api_client, user):
        response = api_client.post(USERS_URL, {
            'username': 'copy',
            'email': 'TEST@example.com',
            'password': 'secret123',
        }, format='json')

        assert response.status_code == 400
        assert response.data['error'] == 'User already exists'


class TestAuthentication:

    def test_login_returns_token_pair(self, api_client, user):
        response = api_client.post(f'{USERS_URL}auth/', {
            'email': 'test@example.com',
            'password': 'testpass123',
        }, format='json')

        assert response.status_code == 200
        assert response.data['token_type'] == 'Bearer'
        assert response.data['access_token']
        assert response.data['refresh_token']
        assert response.data['user']['id'] == user.id

    def test_login_with_wrong_password(self, api_client, user):
        response = api_client.post(f'{USERS_URL}auth/', {
            'email': 'test@example.com',
            'password': 'wrong',
        }, format='json')

        assert response.status_code == 400
        assert response.data['code'] == 'INVALID_CREDENTIALS'

    def test_login_to_deactivated_account(self, api_client, django_user_model):
        django_user_model.objects.create_user(
            email='idle@example.com', username='idle', password='idlepass123', is_active=False,
        )

        response = api_client.post(f'{USERS_URL}auth/', {
            'email': 'idle@example.com',
            'password': 'idlepass123',
        }, format='json')

        assert response.status_code == 400
        assert response.data == {'error': 'Account is deactivated', 'code': 'USER_INACTIVE'}

    def test_access_token_authenticates(self, api_client, user):
        login = api_client.post(f'{USERS_URL}auth/', {
            'email': 'test@example.com',
            'password': 'testpass123',
        }, format='json')

        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {login.data['access_token']}")
        response = api_client.get(f'{USERS_URL}profile/')

        assert response.status_code == 200
        assert response.data['username'] == 'testuser'

    def test_logout_revokes_refresh_token(self, api_client, user):
        login = api_client.post(f'{USERS_URL}auth/', {
            'email': 'test@example.com',
            'password': 'testpass123',
        }, format='json')
        refresh = login.data['refresh_token']

        logout = api_client.post(f'{USERS_URL}logout/', {'refresh_token': refresh}, format='json')
        retry = api_client.post(f'{USERS_URL}token/refresh/', {'refresh': refresh}, format='json')

        assert logout.status_code == 200
        assert retry.status_code == 401

    def test_logout_with_garbage_token(self, api_client):
        response = api_client.post(f'{USERS_URL}logout/', {'refresh_token': 'nope'}, format='json')

        assert response.status_code == 400
        assert response.data['code'] == 'INVALID_TOKEN'


class TestProfile:

    def test_requires_authentication(self, api_client):
        assert api_client.get(f'{USERS_URL}profile/').status_code == 401

    def test_update_profile(self, authenticated_client, user):
        response = authenticated_client.put(f'{USERS_URL}profile/', {
            'username': 'renamed',
            'password': 'newpass123',
        }, format='json')

        assert response.status_code == 200
        assert response.data['username'] == 'renamed'
        user.refresh_from_db()
        assert user.check_password('newpass123')

    def test_update_to_taken_email(self, authenticated_client, staff_user):
        response = authenticated_client.put(
            f'{USERS_URL}profile/', {'email': 'admin@example.com'}, format='json',
        )

        assert response.status_code == 400
        assert response.data['code'] == 'BUSINESS_RULE_VIOLATION'


class TestUserAdministration:

    def test_list_is_admin_only(self, authenticated_client, admin_api_client, user):
        assert authenticated_client.get(USERS_URL).status_code == 403

        response = admin_api_client.get(USERS_URL)

        assert response.status_code == 200
        assert {row['email'] for row in response.data} == {'test@example.com', 'admin@example.com'}

    def test_promote_user(self, admin_api_client, user):
        response = admin_api_client.put(f'{USERS_URL}{user.id}/', {'is_admin': True}, format='json')

        assert response.status_code == 200
        assert response.data['is_admin'] is True

    def test_delete_user(self, admin_api_client, user):
        response = admin_api_client.delete(f'{USERS_URL}{user.id}/')

        assert response.status_code == 200
        assert response.data == {'message': 'User removed'}
        assert admin_api_client.get(f'{USERS_URL}{user.id}/').status_code == 404

    def test_cannot_delete_admin(self, admin_api_client, staff_user):
        response = admin_api_client.delete(f'{USERS_URL}{staff_user.id}/')

        assert response.status_code == 400
        assert response.data['error'] == 'Cannot delete admin user'

    def test_missing_user(self, admin_api_client):
        response = admin_api_client.get(f'{USERS_URL}99999/')

        assert response.status_code == 404
        assert response.data['code'] == 'USER_NOT_FOUND'
