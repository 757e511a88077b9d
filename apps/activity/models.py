from django.core.serializers.json import DjangoJSONEncoder
from django.db import models
import uuid


class ActivityType(models.TextChoices):
    TEAM_CREATED = 'team_created', 'Team created'
    MEMBER_JOINED = 'member_joined', 'Member joined'
    MEMBER_LEFT = 'member_left', 'Member left'
    RULE_CREATED = 'rule_created', 'Rule created'
    RULE_UPDATED = 'rule_updated', 'Rule updated'
    FINE_ISSUED = 'fine_issued', 'Fine issued'
    FINE_UPDATED = 'fine_updated', 'Fine updated'
    FINE_DELETED = 'fine_deleted', 'Fine deleted'
    PAYMENT_RECORDED = 'payment_recorded', 'Payment recorded'
    EXPENSE_RECORDED = 'expense_recorded', 'Expense recorded'
    DISPUTE_CREATED = 'dispute_created', 'Dispute created'
    DISPUTE_RESOLVED = 'dispute_resolved', 'Dispute resolved'


class ActivityLog(models.Model):
    """Immutable team audit entry."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    team = models.ForeignKey('teams.Team', on_delete=models.CASCADE, related_name='activity')
    # Null for actions the system takes on its own (e.g. community auto-approval)
    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='activity'
    )
    activity_type = models.CharField(max_length=32, choices=ActivityType.choices)
    metadata = models.JSONField(default=dict, blank=True, encoder=DjangoJSONEncoder)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'activity_log'
        indexes = [
            models.Index(fields=['team', 'created_at']),
            models.Index(fields=['activity_type']),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.activity_type} in {self.team_id}"
