"""
Membership gate.

Resolves a user's membership in a team. Soft-removed members are still
returned so callers can tell "removed" apart from "never joined"; use
``is_active`` on the result.
"""

from typing import Optional
from uuid import UUID

from django.db import DEFAULT_DB_ALIAS

from apps.teams.models import TeamMember, TeamRole


class MembershipGate:

    def get(self, *, team_id: UUID, user_id: UUID, using: str = DEFAULT_DB_ALIAS) -> Optional[TeamMember]:
        return (
            TeamMember.objects
            .using(using)
            .filter(team_id=team_id, user_id=user_id)
            .first()
        )

    def is_active_member(self, *, team_id: UUID, user_id: UUID, using: str = DEFAULT_DB_ALIAS) -> bool:
        membership = self.get(team_id=team_id, user_id=user_id, using=using)
        return membership is not None and membership.is_active

    def is_admin(self, *, team_id: UUID, user_id: UUID, using: str = DEFAULT_DB_ALIAS) -> bool:
        membership = self.get(team_id=team_id, user_id=user_id, using=using)
        return (
            membership is not None
            and membership.is_active
            and membership.role == TeamRole.ADMIN
        )
