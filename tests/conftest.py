import pytest
from rest_framework.test import APIClient

from apps.accounts.services import issue_token, register_user

API_PREFIX = '/api/v1'


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def user_data():
    return {
        'name': 'John Doe',
        'email': 'john@example.com',
        'password': 'Password123',
        'birthdate': '1990-05-15',
    }


@pytest.fixture
def user(db, user_data):
    """A registered Taurus user."""
    user, _ = register_user(**user_data)
    return user


@pytest.fixture
def token(user):
    return issue_token(user)


@pytest.fixture
def auth_client(api_client, token):
    """API client sending the user's bearer token."""
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {token}')
    return api_client
