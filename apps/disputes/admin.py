# ==========================================
# apps/disputes/admin.py
# ==========================================

from django.contrib import admin
from apps.disputes.models import Dispute, DisputeVote


class DisputeVoteInline(admin.TabularInline):
    """Read-only inline for votes; votes are append-only."""
    model = DisputeVote
    extra = 0
    fields = ['user', 'vote', 'created_at']
    readonly_fields = fields
    can_delete = False

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Dispute)
class DisputeAdmin(admin.ModelAdmin):
    """
    Admin interface for Disputes.

    Read-only: resolution must go through the API so the fine deletion and
    the audit entry happen with the status change.
    """

    list_display = [
        'id',
        'team',
        'disputed_by',
        'status',
        'votes_count',
        'votes_required',
        'resolved_by',
        'created_at',
    ]
    list_filter = ['status', 'created_at', 'resolved_at']
    search_fields = ['reason', 'team__name', 'disputed_by__email']
    readonly_fields = [
        'fine_id',
        'team',
        'disputed_by',
        'reason',
        'status',
        'votes_count',
        'votes_required',
        'resolved_by',
        'resolution_note',
        'resolved_at',
        'created_at',
    ]
    exclude = ['fine']
    inlines = [DisputeVoteInline]
    date_hierarchy = 'created_at'
    ordering = ['-created_at']

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False

    def get_queryset(self, request):
        """Optimize query."""
        qs = super().get_queryset(request)
        return qs.select_related('team', 'disputed_by', 'resolved_by')
