import pytest
from django.urls import reverse
from rest_framework import status
from apps.accounts.models import User


# =============================================================================
# Token Authentication Tests
# =============================================================================

@pytest.mark.django_db
class TestTokenObtain:
    """Tests for POST /api/auth/token/"""

    def test_obtain_token(self, api_client, user):
        url = reverse('token_obtain_pair')
        data = {'email': 'testuser@example.com', 'password': 'TestPass123!'}
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert 'access' in response.data
        assert 'refresh' in response.data

    def test_obtain_token_wrong_password(self, api_client, user):
        url = reverse('token_obtain_pair')
        data = {'email': 'testuser@example.com', 'password': 'WrongPass123!'}
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_obtain_token_inactive_user(self, api_client, user_inactive):
        """Inactive users cannot log in."""
        url = reverse('token_obtain_pair')
        data = {'email': 'inactive@example.com', 'password': 'TestPass123!'}
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_refresh_token(self, api_client, user):
        obtain = api_client.post(
            reverse('token_obtain_pair'),
            {'email': 'testuser@example.com', 'password': 'TestPass123!'},
            format='json',
        )

        response = api_client.post(
            reverse('token_refresh'),
            {'refresh': obtain.data['refresh']},
            format='json',
        )

        assert response.status_code == status.HTTP_200_OK
        assert 'access' in response.data


@pytest.mark.django_db
class TestUserModel:

    def test_email_is_normalized(self):
        user = User.objects.create_user(email='Someone@EXAMPLE.com', password='TestPass123!')

        assert user.email == 'Someone@example.com'

    def test_display_name_falls_back_to_email(self):
        user = User.objects.create_user(email='larry@example.com', password='TestPass123!')

        assert user.get_display_name() == 'larry'

    def test_email_required(self):
        with pytest.raises(ValueError):
            User.objects.create_user(email='', password='TestPass123!')


def test_health_check(client):
    response = client.get(reverse('health-check'))

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {'status': 'ok'}
