from django.core.validators import MinValueValidator
from django.db import models
from decimal import Decimal
import uuid


class FineStatus(models.TextChoices):
    UNPAID = 'unpaid', 'Unpaid'
    PARTIALLY_PAID = 'partially_paid', 'Partially paid'
    PAID = 'paid', 'Paid'


class Fine(models.Model):
    """Fine levied against a team member."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    team = models.ForeignKey(
        'teams.Team',
        on_delete=models.CASCADE,
        related_name='fines'
    )
    offender = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='fines_received'
    )
    issued_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='fines_issued'
    )

    custom_label = models.CharField(max_length=200, blank=True)

    # Financial details
    amount = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    amount_paid = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal('0.00')
    )
    status = models.CharField(
        max_length=20,
        choices=FineStatus.choices,
        default=FineStatus.UNPAID
    )
    note = models.TextField(blank=True)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'fines'
        indexes = [
            models.Index(fields=['team', 'created_at']),
            models.Index(fields=['offender', 'status']),
        ]
        ordering = ['-created_at']

    def __str__(self):
        label = self.custom_label or 'Fine'
        return f"{label} - {self.amount} ({self.offender})"
