"""
Vote aggregation service.

Records votes and keeps ``Dispute.votes_count`` equal to the number of
positive votes. In community mode the vote that brings the count up to the
dispute's quorum approves the dispute in the same transaction.
"""

import logging
from typing import Optional
from uuid import UUID

from django.conf import settings
from django.db import IntegrityError
from django.db.models import F

from apps.accounts.models import User
from apps.disputes.models import Dispute, DisputeVote
from apps.teams.services import MembershipGate, TeamConfigProvider

from .exceptions import (
    DisputeNotFoundError,
    DisputeClosedError,
    DisputeForbiddenError,
    AlreadyVotedError,
)
from .resolution import ResolutionEngine
from .unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class VoteAggregator:

    def __init__(
        self,
        *,
        membership_gate: Optional[MembershipGate] = None,
        team_config_provider: Optional[TeamConfigProvider] = None,
        resolution_engine: Optional[ResolutionEngine] = None,
    ):
        self.membership_gate = membership_gate or MembershipGate()
        self.team_config_provider = team_config_provider or TeamConfigProvider()
        self.resolution_engine = resolution_engine or ResolutionEngine()

    def cast_vote(self, *, voter: User, dispute_id: UUID, vote: bool) -> DisputeVote:
        """
        Vote for (True) or against (False) a pending dispute.

        Checks run in order and the first failure wins:
        1. Dispute exists
        2. Dispute is pending
        3. Voter is an active member of the dispute's team
        4. Voter has not voted on this dispute yet
        5. Voter is not the dispute author

        Membership is checked once, here; a removal that commits while the
        vote is being written is not re-validated.

        Negative votes are recorded but never move the counter and never
        resolve anything. There is no rejection by vote.

        Args:
            voter: User casting the vote
            dispute_id: UUID of the dispute
            vote: True to support cancelling the fine

        Returns:
            Created DisputeVote. A resulting auto-approval is a side effect
            and is not reflected in the return value.

        Raises:
            DisputeNotFoundError: If dispute doesn't exist
            DisputeClosedError: If dispute is no longer pending
            DisputeForbiddenError: If voter is not an active member or is
                the dispute author
            AlreadyVotedError: If voter already voted (caught from
                IntegrityError under concurrent requests)
        """
        with UnitOfWork() as uow:
            try:
                dispute = Dispute.objects.using(uow.using).get(id=dispute_id)
            except Dispute.DoesNotExist:
                raise DisputeNotFoundError()

            if not dispute.is_pending:
                raise DisputeClosedError()

            is_member = self.membership_gate.is_active_member(
                team_id=dispute.team_id,
                user_id=voter.id,
                using=uow.using,
            )
            if not is_member:
                raise DisputeForbiddenError("Vous devez être membre de l'équipe pour voter")

            already_voted = (
                DisputeVote.objects
                .using(uow.using)
                .filter(dispute_id=dispute.id, user_id=voter.id)
                .exists()
            )
            if already_voted:
                raise AlreadyVotedError()

            if dispute.disputed_by_id == voter.id:
                raise DisputeForbiddenError('Vous ne pouvez pas voter sur votre propre contestation')

            try:
                new_vote = DisputeVote.objects.using(uow.using).create(
                    dispute=dispute,
                    user=voter,
                    vote=vote,
                )
            except IntegrityError:
                # Database constraint caught a concurrent duplicate vote
                raise AlreadyVotedError()

            if vote:
                self._count_positive_vote(uow=uow, dispute=dispute)

        logger.info("Vote %s recorded on dispute %s (%s)", new_vote.id, dispute.id, vote)
        return new_vote

    def _count_positive_vote(self, *, uow: UnitOfWork, dispute: Dispute) -> None:
        # The UPDATE takes the row lock; competing voters queue up behind it
        # and each sees the count including every earlier committed vote.
        (
            Dispute.objects
            .using(uow.using)
            .filter(id=dispute.id)
            .update(votes_count=F('votes_count') + 1)
        )
        dispute.refresh_from_db(using=uow.using, fields=['votes_count', 'status'])

        config = self.team_config_provider.get(team_id=dispute.team_id, using=uow.using)
        if not config.is_community or dispute.votes_count < dispute.votes_required:
            return

        if not dispute.is_pending:
            logger.warning(
                "Quorum reached on dispute %s after it was resolved; vote kept, no re-resolution",
                dispute.id,
            )
            return

        try:
            self.resolution_engine.resolve_internal(
                uow=uow,
                dispute=dispute,
                approved=True,
                resolved_by_id=None,
                note=settings.DISPUTE_AUTO_APPROVAL_NOTE,
            )
        except DisputeClosedError:
            logger.warning(
                "Dispute %s was resolved concurrently; vote kept, no re-resolution",
                dispute.id,
            )
