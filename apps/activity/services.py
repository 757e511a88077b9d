"""
Activity services.

ActivityRecorder appends audit entries inside the caller's transaction;
entries are never updated or deleted.
"""

from typing import Any, Optional
from uuid import UUID

from django.db import DEFAULT_DB_ALIAS
from django.db.models import QuerySet

from apps.activity.models import ActivityLog
from apps.teams.services import MembershipGate, NotTeamMemberError

DEFAULT_FEED_LIMIT = 50


class ActivityRecorder:

    def append(
        self,
        *,
        team_id: UUID,
        user_id: Optional[UUID],
        activity_type: str,
        metadata: Optional[dict[str, Any]] = None,
        using: str = DEFAULT_DB_ALIAS,
    ) -> ActivityLog:
        return ActivityLog.objects.using(using).create(
            team_id=team_id,
            user_id=user_id,
            activity_type=activity_type,
            metadata=metadata or {},
        )


def get_team_activity(*, team_id: UUID, user, limit: int = DEFAULT_FEED_LIMIT) -> QuerySet[ActivityLog]:
    """
    Get a team's activity feed, newest first.

    Raises:
        NotTeamMemberError: If user is not an active member of the team
    """
    if not MembershipGate().is_active_member(team_id=team_id, user_id=user.id):
        raise NotTeamMemberError("Vous n'êtes pas membre de cette équipe")

    return (
        ActivityLog.objects
        .filter(team_id=team_id)
        .select_related('user')
        .order_by('-created_at')[:limit]
    )
