"""
Dispute lifecycle service.

Opens disputes: one per fine, only by the fine's offender, only in teams
that accept disputes.
"""

import logging
from typing import Optional
from uuid import UUID

from django.db import IntegrityError

from apps.accounts.models import User
from apps.activity.models import ActivityType
from apps.activity.services import ActivityRecorder
from apps.disputes.models import Dispute, DisputeStatus
from apps.fines.services import FineStore
from apps.teams.services import TeamConfigProvider

from .exceptions import (
    FineNotFoundError,
    DisputeForbiddenError,
    AlreadyDisputedError,
    DisputesDisabledError,
)
from .unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class DisputeLifecycleManager:

    def __init__(
        self,
        *,
        fine_store: Optional[FineStore] = None,
        team_config_provider: Optional[TeamConfigProvider] = None,
        activity_recorder: Optional[ActivityRecorder] = None,
    ):
        self.fine_store = fine_store or FineStore()
        self.team_config_provider = team_config_provider or TeamConfigProvider()
        self.activity_recorder = activity_recorder or ActivityRecorder()

    def create_dispute(self, *, requester: User, fine_id: UUID, reason: str) -> Dispute:
        """
        Contest a fine.

        Checks run in order and the first failure wins:
        1. Fine exists
        2. Requester is the fine's offender
        3. Fine has no dispute yet
        4. Team has disputes enabled

        The team's current quorum is copied onto the dispute and stays
        fixed even if the team settings change later.

        Args:
            requester: User contesting the fine
            fine_id: UUID of the contested fine
            reason: Why the fine should be cancelled (10-1000 chars,
                validated by the caller)

        Returns:
            Created Dispute instance

        Raises:
            FineNotFoundError: If fine doesn't exist
            DisputeForbiddenError: If requester is not the offender
            AlreadyDisputedError: If the fine is already contested
                (caught from IntegrityError under concurrent creation)
            DisputesDisabledError: If the team does not accept disputes
        """
        with UnitOfWork() as uow:
            fine = self.fine_store.get(fine_id=fine_id, using=uow.using)
            if fine is None:
                raise FineNotFoundError()

            if fine.offender_id != requester.id:
                raise DisputeForbiddenError('Seul le contrevenant peut contester une amende')

            if Dispute.objects.using(uow.using).filter(fine_id=fine.id).exists():
                raise AlreadyDisputedError()

            config = self.team_config_provider.get(team_id=fine.team_id, using=uow.using)
            if not config.dispute_enabled:
                raise DisputesDisabledError()

            try:
                dispute = Dispute.objects.using(uow.using).create(
                    fine_id=fine.id,
                    team_id=fine.team_id,
                    disputed_by=requester,
                    reason=reason,
                    status=DisputeStatus.PENDING,
                    votes_count=0,
                    votes_required=config.dispute_votes_required,
                )
            except IntegrityError:
                # Database constraint caught a concurrent dispute on the same fine
                raise AlreadyDisputedError()

            self.activity_recorder.append(
                team_id=fine.team_id,
                user_id=requester.id,
                activity_type=ActivityType.DISPUTE_CREATED,
                metadata={
                    'dispute_id': str(dispute.id),
                    'fine_id': str(fine.id),
                },
                using=uow.using,
            )

        logger.info(
            "Dispute %s opened on fine %s (quorum %s)",
            dispute.id,
            fine.id,
            dispute.votes_required,
        )
        return dispute
