"""
Disputes app services layer.

Services contain business logic and orchestrate operations across models.
Every state-changing operation runs in one UnitOfWork (a single database
transaction) that is passed explicitly to each step.

The module-level functions use default collaborators; build the classes
directly to inject others.
"""

from .exceptions import (
    DisputeError,
    FineNotFoundError,
    DisputeForbiddenError,
    AlreadyDisputedError,
    DisputesDisabledError,
    DisputeNotFoundError,
    DisputeClosedError,
    AlreadyVotedError,
)

from .unit_of_work import UnitOfWork

from .dispute_lifecycle import DisputeLifecycleManager
from .vote_aggregation import VoteAggregator
from .resolution import ResolutionEngine

from .queries import (
    list_team_disputes,
    get_fine_dispute,
    get_dispute,
    get_dispute_votes,
    get_user_vote,
)


def create_dispute(*, requester, fine_id, reason):
    return DisputeLifecycleManager().create_dispute(
        requester=requester,
        fine_id=fine_id,
        reason=reason,
    )


def cast_vote(*, voter, dispute_id, vote):
    return VoteAggregator().cast_vote(voter=voter, dispute_id=dispute_id, vote=vote)


def resolve_dispute(*, dispute_id, acting_user, approved, note=None):
    return ResolutionEngine().resolve(
        dispute_id=dispute_id,
        acting_user=acting_user,
        approved=approved,
        note=note,
    )


__all__ = [
    # Exceptions
    'DisputeError',
    'FineNotFoundError',
    'DisputeForbiddenError',
    'AlreadyDisputedError',
    'DisputesDisabledError',
    'DisputeNotFoundError',
    'DisputeClosedError',
    'AlreadyVotedError',

    # Components
    'UnitOfWork',
    'DisputeLifecycleManager',
    'VoteAggregator',
    'ResolutionEngine',

    # Commands
    'create_dispute',
    'cast_vote',
    'resolve_dispute',

    # Queries
    'list_team_disputes',
    'get_fine_dispute',
    'get_dispute',
    'get_dispute_votes',
    'get_user_vote',
]
