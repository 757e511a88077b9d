"""
Team dispute configuration.

Reads and updates the per-team dispute settings. Disputes snapshot the
quorum when they are created, so updates here never reach disputes that
are already in flight.
"""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from django.conf import settings
from django.db import DEFAULT_DB_ALIAS, transaction

from apps.accounts.models import User
from apps.teams.models import DisputeMode, Team

from .exceptions import (
    TeamNotFoundError,
    InsufficientPermissionsError,
)
from .membership_gate import MembershipGate

# Sentinel so callers can explicitly clear nullable settings with None
UNSET = object()


@dataclass(frozen=True)
class TeamDisputeConfig:
    dispute_enabled: bool
    dispute_mode: str
    dispute_votes_required: int

    @property
    def is_community(self) -> bool:
        return self.dispute_mode == DisputeMode.COMMUNITY


def build_dispute_config(team: Team) -> TeamDisputeConfig:
    """Resolve a team's settings, filling in defaults for unset values."""
    return TeamDisputeConfig(
        dispute_enabled=team.dispute_enabled,
        dispute_mode=team.dispute_mode or DisputeMode.ADMIN,
        dispute_votes_required=(
            team.dispute_votes_required or settings.DISPUTE_DEFAULT_VOTES_REQUIRED
        ),
    )


class TeamConfigProvider:

    def get(self, *, team_id: UUID, using: str = DEFAULT_DB_ALIAS) -> TeamDisputeConfig:
        try:
            team = Team.objects.using(using).get(id=team_id)
        except Team.DoesNotExist:
            raise TeamNotFoundError(f"Team with ID {team_id} not found")
        return build_dispute_config(team)


@transaction.atomic
def update_dispute_settings(
    *,
    team_id: UUID,
    user: User,
    dispute_enabled: Optional[bool] = None,
    dispute_mode=UNSET,
    dispute_votes_required=UNSET,
) -> Team:
    """
    Update a team's dispute settings (admin only).

    Uses select_for_update to prevent concurrent modifications.
    ``dispute_mode`` and ``dispute_votes_required`` accept None to clear
    the value; leave them out to keep the current one.

    Raises:
        TeamNotFoundError: If team doesn't exist
        InsufficientPermissionsError: If user is not an active admin
    """
    try:
        team = (
            Team.objects
            .select_for_update()
            .get(id=team_id)
        )
    except Team.DoesNotExist:
        raise TeamNotFoundError(f"Team with ID {team_id} not found")

    if not MembershipGate().is_admin(team_id=team.id, user_id=user.id):
        raise InsufficientPermissionsError("Only team admins can change dispute settings")

    update_fields = ['updated_at']

    if dispute_enabled is not None:
        team.dispute_enabled = dispute_enabled
        update_fields.append('dispute_enabled')

    if dispute_mode is not UNSET:
        team.dispute_mode = dispute_mode
        update_fields.append('dispute_mode')

    if dispute_votes_required is not UNSET:
        team.dispute_votes_required = dispute_votes_required
        update_fields.append('dispute_votes_required')

    team.save(update_fields=update_fields)

    return team
