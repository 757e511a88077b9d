"""Read-side dispute queries."""

from typing import Optional
from uuid import UUID

from django.db.models import Prefetch, QuerySet

from apps.accounts.models import User
from apps.disputes.models import Dispute, DisputeVote
from apps.teams.services import MembershipGate

from .exceptions import DisputeNotFoundError, DisputeForbiddenError


def _dispute_queryset() -> QuerySet[Dispute]:
    # prefetch (not select_related) on fine: approved disputes point at a
    # deleted fine and must still come back, with fine=None
    return (
        Dispute.objects
        .select_related('disputed_by', 'resolved_by')
        .prefetch_related('fine__offender')
    )


def _with_votes(queryset: QuerySet[Dispute]) -> QuerySet[Dispute]:
    return queryset.prefetch_related(
        Prefetch(
            'votes',
            queryset=DisputeVote.objects.select_related('user').order_by('-created_at')
        )
    )


def list_team_disputes(
    *,
    team_id: UUID,
    user: User,
    status: Optional[str] = None
) -> QuerySet[Dispute]:
    """
    Get a team's disputes, newest first.

    Raises:
        DisputeForbiddenError: If user is not an active member of the team
    """
    if not MembershipGate().is_active_member(team_id=team_id, user_id=user.id):
        raise DisputeForbiddenError("Vous n'êtes pas membre de cette équipe")

    queryset = _dispute_queryset().filter(team_id=team_id)
    if status:
        queryset = queryset.filter(status=status)

    return queryset.order_by('-created_at')


def get_fine_dispute(*, fine_id: UUID) -> Optional[Dispute]:
    """Get the dispute on a fine, with its votes, or None."""
    return _with_votes(_dispute_queryset()).filter(fine_id=fine_id).first()


def get_dispute(*, dispute_id: UUID, with_votes: bool = False) -> Dispute:
    """
    Get a dispute by ID.

    Raises:
        DisputeNotFoundError: If dispute doesn't exist
    """
    queryset = _dispute_queryset()
    if with_votes:
        queryset = _with_votes(queryset)

    try:
        return queryset.get(id=dispute_id)
    except Dispute.DoesNotExist:
        raise DisputeNotFoundError()


def get_dispute_votes(*, dispute_id: UUID) -> QuerySet[DisputeVote]:
    """Get all votes on a dispute, newest first."""
    return (
        DisputeVote.objects
        .filter(dispute_id=dispute_id)
        .select_related('user')
        .order_by('-created_at')
    )


def get_user_vote(*, dispute_id: UUID, user: User) -> Optional[DisputeVote]:
    """Get the user's vote on a dispute, or None if they have not voted."""
    return DisputeVote.objects.filter(dispute_id=dispute_id, user=user).first()
