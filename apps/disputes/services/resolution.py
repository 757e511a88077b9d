"""
Dispute resolution.

ResolutionEngine is the only code that moves a dispute out of ``pending``
and the only caller of ``FineStore.delete``. Admins reach it through
``resolve``; the vote aggregator calls ``resolve_internal`` directly when
a community quorum is reached.
"""

import logging
from typing import Optional
from uuid import UUID

from django.utils import timezone

from apps.accounts.models import User
from apps.activity.models import ActivityType
from apps.activity.services import ActivityRecorder
from apps.disputes.models import Dispute, DisputeStatus
from apps.fines.services import FineStore
from apps.teams.services import MembershipGate

from .exceptions import (
    DisputeNotFoundError,
    DisputeClosedError,
    DisputeForbiddenError,
)
from .unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class ResolutionEngine:

    def __init__(
        self,
        *,
        fine_store: Optional[FineStore] = None,
        membership_gate: Optional[MembershipGate] = None,
        activity_recorder: Optional[ActivityRecorder] = None,
    ):
        self.fine_store = fine_store or FineStore()
        self.membership_gate = membership_gate or MembershipGate()
        self.activity_recorder = activity_recorder or ActivityRecorder()

    def resolve(
        self,
        *,
        dispute_id: UUID,
        acting_user: User,
        approved: bool,
        note: Optional[str] = None,
    ) -> Dispute:
        """
        Approve or reject a dispute (admin only).

        Approving deletes the contested fine. Rejecting leaves it in place.

        Args:
            dispute_id: UUID of the dispute
            acting_user: User resolving the dispute (must be an active admin)
            approved: True to approve (cancel the fine), False to reject
            note: Optional resolution note (max 500 chars)

        Returns:
            The resolved Dispute

        Raises:
            DisputeNotFoundError: If dispute doesn't exist
            DisputeClosedError: If dispute is no longer pending, including
                when a concurrent resolution wins the race
            DisputeForbiddenError: If acting_user is not an active team admin
        """
        with UnitOfWork() as uow:
            try:
                dispute = Dispute.objects.using(uow.using).get(id=dispute_id)
            except Dispute.DoesNotExist:
                raise DisputeNotFoundError()

            if not dispute.is_pending:
                raise DisputeClosedError()

            is_admin = self.membership_gate.is_admin(
                team_id=dispute.team_id,
                user_id=acting_user.id,
                using=uow.using,
            )
            if not is_admin:
                raise DisputeForbiddenError('Seul un admin peut résoudre une contestation')

            return self.resolve_internal(
                uow=uow,
                dispute=dispute,
                approved=approved,
                resolved_by_id=acting_user.id,
                note=note,
            )

    def resolve_internal(
        self,
        *,
        uow: UnitOfWork,
        dispute: Dispute,
        approved: bool,
        resolved_by_id: Optional[UUID],
        note: Optional[str] = None,
    ) -> Dispute:
        """
        Apply the terminal transition inside the caller's unit of work.

        The status change is a compare-and-set on ``status = pending``:
        only one writer can ever match the row, so the fine is deleted and
        the resolution logged at most once per dispute.

        Raises:
            DisputeClosedError: If the dispute was already resolved
        """
        uow.ensure_active()

        new_status = DisputeStatus.APPROVED if approved else DisputeStatus.REJECTED
        resolved_at = timezone.now()

        updated = (
            Dispute.objects
            .using(uow.using)
            .filter(id=dispute.id, status=DisputeStatus.PENDING)
            .update(
                status=new_status,
                resolved_by_id=resolved_by_id,
                resolution_note=note,
                resolved_at=resolved_at,
            )
        )
        if not updated:
            raise DisputeClosedError()

        if approved:
            self.fine_store.delete(fine_id=dispute.fine_id, using=uow.using)

        self.activity_recorder.append(
            team_id=dispute.team_id,
            user_id=resolved_by_id,
            activity_type=ActivityType.DISPUTE_RESOLVED,
            metadata={
                'dispute_id': str(dispute.id),
                'approved': approved,
                'fine_id': str(dispute.fine_id),
            },
            using=uow.using,
        )

        dispute.refresh_from_db(using=uow.using)

        uow.on_commit(lambda: logger.info(
            "Dispute %s %s by %s",
            dispute.id,
            new_status,
            resolved_by_id or 'community vote',
        ))

        return dispute
