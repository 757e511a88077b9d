# ==========================================
# apps/teams/models.py
# ==========================================

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
import uuid
import secrets


class TeamRole(models.TextChoices):
    ADMIN = 'admin', 'Admin'
    TREASURER = 'treasurer', 'Treasurer'
    MEMBER = 'member', 'Member'


class DisputeMode(models.TextChoices):
    ADMIN = 'admin', 'Admin decision'
    COMMUNITY = 'community', 'Community vote'


class Team(models.Model):
    """Team sharing a fines pool."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    invite_code = models.CharField(max_length=16, unique=True, db_index=True, editable=False)
    created_by = models.ForeignKey('accounts.User', on_delete=models.PROTECT, related_name='created_teams')
    is_closed = models.BooleanField(default=False)

    # Dispute settings
    dispute_enabled = models.BooleanField(default=False)
    dispute_mode = models.CharField(max_length=20, choices=DisputeMode.choices, null=True, blank=True)
    dispute_votes_required = models.PositiveSmallIntegerField(
        null=True,
        blank=True,
        validators=[MinValueValidator(1), MaxValueValidator(100)],
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'teams'
        indexes = [
            models.Index(fields=['created_by', 'created_at']),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        if not self.invite_code:
            self.invite_code = secrets.token_urlsafe(12)[:16]
        super().save(*args, **kwargs)


class TeamMember(models.Model):
    """User membership in a team. Removal is a soft delete."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    team = models.ForeignKey(Team, on_delete=models.CASCADE, related_name='members')
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='team_memberships')
    role = models.CharField(max_length=20, choices=TeamRole.choices, default=TeamRole.MEMBER)
    is_deleted = models.BooleanField(default=False)
    joined_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'team_members'
        unique_together = [['team', 'user']]
        indexes = [
            models.Index(fields=['team', 'role']),
            models.Index(fields=['user', 'joined_at']),
        ]
        ordering = ['joined_at']

    def __str__(self):
        return f"{self.user.get_display_name()} in {self.team.name} ({self.role})"

    @property
    def is_active(self):
        return not self.is_deleted
