import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.teams.models import Team, TeamMember, TeamRole


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def admin_user(db):
    return User.objects.create_user(
        email='admin@example.com',
        password='TestPass123!',
        display_name='Team Admin',
    )


@pytest.fixture
def member_user(db):
    return User.objects.create_user(
        email='member@example.com',
        password='TestPass123!',
        display_name='Team Member',
    )


@pytest.fixture
def outsider_user(db):
    return User.objects.create_user(
        email='outsider@example.com',
        password='TestPass123!',
        display_name='Outsider',
    )


@pytest.fixture
def team(db, admin_user, member_user):
    """Team with default dispute settings, one admin and one member."""
    team = Team.objects.create(name='FC Amendes', created_by=admin_user)
    TeamMember.objects.create(team=team, user=admin_user, role=TeamRole.ADMIN)
    TeamMember.objects.create(team=team, user=member_user, role=TeamRole.MEMBER)
    return team


def _authenticated(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def admin_client(admin_user):
    return _authenticated(admin_user)


@pytest.fixture
def member_client(member_user):
    return _authenticated(member_user)


@pytest.fixture
def outsider_client(outsider_user):
    return _authenticated(outsider_user)
