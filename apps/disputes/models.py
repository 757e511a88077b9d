# ==========================================
# apps/disputes/models.py
# ==========================================

from django.core.validators import MinValueValidator
from django.db import models
import uuid


class DisputeStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    APPROVED = 'approved', 'Approved'
    REJECTED = 'rejected', 'Rejected'


class Dispute(models.Model):
    """
    A member's contest of a single fine.

    ``votes_required`` is copied from the team settings at creation and
    never changes afterwards. The row outlives the fine: approving a
    dispute deletes the fine but keeps ``fine_id`` for the record, hence
    no database-level constraint on ``fine``.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    fine = models.OneToOneField(
        'fines.Fine',
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name='dispute'
    )
    team = models.ForeignKey('teams.Team', on_delete=models.CASCADE, related_name='disputes')
    disputed_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.PROTECT,
        related_name='disputes_opened'
    )
    reason = models.CharField(max_length=1000)
    status = models.CharField(
        max_length=20,
        choices=DisputeStatus.choices,
        default=DisputeStatus.PENDING
    )

    # Positive votes only
    votes_count = models.PositiveIntegerField(default=0)
    votes_required = models.PositiveIntegerField(validators=[MinValueValidator(1)])

    # Resolution (resolved_by stays null for community auto-approval)
    resolved_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='disputes_resolved'
    )
    resolution_note = models.CharField(max_length=500, null=True, blank=True)
    resolved_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'fine_disputes'
        indexes = [
            models.Index(fields=['team', 'created_at']),
            models.Index(fields=['status']),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"Dispute on {self.fine_id} ({self.status})"

    @property
    def is_pending(self):
        return self.status == DisputeStatus.PENDING


class DisputeVote(models.Model):
    """One member's vote on a dispute. Append-only."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    dispute = models.ForeignKey(Dispute, on_delete=models.CASCADE, related_name='votes')
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='dispute_votes')
    vote = models.BooleanField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'fine_dispute_votes'
        unique_together = [['dispute', 'user']]
        indexes = [
            models.Index(fields=['dispute', 'created_at']),
        ]
        ordering = ['-created_at']

    def __str__(self):
        verdict = 'for' if self.vote else 'against'
        return f"{self.user.get_display_name()} {verdict} {self.dispute_id}"
