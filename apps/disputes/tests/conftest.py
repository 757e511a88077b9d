import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.disputes.models import Dispute, DisputeStatus
from apps.fines.models import Fine
from apps.teams.models import DisputeMode, Team, TeamMember, TeamRole


def make_user(email, display_name):
    return User.objects.create_user(
        email=email,
        password='TestPass123!',
        display_name=display_name,
    )


def client_for(user):
    """Return an API client authenticated as user."""
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def team_admin(db):
    """Create and return the team admin."""
    return make_user('admin@example.com', 'Team Admin')


@pytest.fixture
def offender(db):
    """Create and return the member who received the fine."""
    return make_user('offender@example.com', 'Late Larry')


@pytest.fixture
def voters(db):
    """Create and return three regular members."""
    return [
        make_user(f'voter{i}@example.com', f'Voter {i}')
        for i in range(1, 4)
    ]


@pytest.fixture
def outsider(db):
    """Create and return a user not in the team."""
    return make_user('outsider@example.com', 'Outsider')


@pytest.fixture
def removed_member(db):
    """Create and return a user whose membership was soft-deleted."""
    return make_user('removed@example.com', 'Removed Member')


@pytest.fixture
def team(db, team_admin, offender, voters, removed_member):
    """Community-mode team with admin, offender, three voters and a removed member."""
    team = Team.objects.create(
        name='FC Amendes',
        created_by=team_admin,
        dispute_enabled=True,
        dispute_mode=DisputeMode.COMMUNITY,
        dispute_votes_required=3,
    )
    TeamMember.objects.create(team=team, user=team_admin, role=TeamRole.ADMIN)
    TeamMember.objects.create(team=team, user=offender, role=TeamRole.MEMBER)
    for voter in voters:
        TeamMember.objects.create(team=team, user=voter, role=TeamRole.MEMBER)
    TeamMember.objects.create(team=team, user=removed_member, role=TeamRole.MEMBER, is_deleted=True)
    return team


@pytest.fixture
def admin_mode_team(team):
    """Same team switched to admin-only resolution."""
    team.dispute_mode = DisputeMode.ADMIN
    team.save(update_fields=['dispute_mode'])
    return team


@pytest.fixture
def fine(team, offender, team_admin):
    """Create and return a fine against the offender."""
    return Fine.objects.create(
        team=team,
        offender=offender,
        issued_by=team_admin,
        custom_label='Retard entraînement',
        amount=Decimal('5.50'),
    )


@pytest.fixture
def dispute(fine, team, offender):
    """Pending dispute on the fine with a quorum of 3."""
    return Dispute.objects.create(
        fine=fine,
        team=team,
        disputed_by=offender,
        reason='I was there on time, check the group chat.',
        status=DisputeStatus.PENDING,
        votes_required=3,
    )


@pytest.fixture
def offender_client(offender):
    return client_for(offender)


@pytest.fixture
def admin_client(team_admin):
    return client_for(team_admin)


@pytest.fixture
def voter_client(voters):
    return client_for(voters[0])


@pytest.fixture
def outsider_client(outsider):
    return client_for(outsider)
