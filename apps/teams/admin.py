# ==========================================
# apps/teams/admin.py
# ==========================================

from django.contrib import admin
from apps.teams.models import Team, TeamMember


class TeamMemberInline(admin.TabularInline):
    """Inline admin for team members."""
    model = TeamMember
    extra = 0
    fields = ['user', 'role', 'is_deleted', 'joined_at']
    readonly_fields = ['joined_at']


@admin.register(Team)
class TeamAdmin(admin.ModelAdmin):
    """Admin interface for Teams."""

    list_display = [
        'name',
        'created_by',
        'member_count',
        'dispute_enabled',
        'dispute_mode',
        'dispute_votes_required',
        'created_at',
    ]
    list_filter = ['dispute_enabled', 'dispute_mode', 'is_closed', 'created_at']
    search_fields = ['name', 'description', 'created_by__email', 'invite_code']
    readonly_fields = ['invite_code', 'created_at', 'updated_at']
    inlines = [TeamMemberInline]
    date_hierarchy = 'created_at'
    ordering = ['-created_at']

    fieldsets = (
        ('Basic Information', {
            'fields': ('name', 'description', 'created_by', 'is_closed')
        }),
        ('Disputes', {
            'fields': ('dispute_enabled', 'dispute_mode', 'dispute_votes_required')
        }),
        ('Invitation', {
            'fields': ('invite_code',)
        }),
        ('Metadata', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def member_count(self, obj):
        """Show number of active members."""
        return obj.members.filter(is_deleted=False).count()
    member_count.short_description = 'Members'


@admin.register(TeamMember)
class TeamMemberAdmin(admin.ModelAdmin):
    """Admin interface for Team Members."""

    list_display = ['user', 'team', 'role', 'is_deleted', 'joined_at']
    list_filter = ['role', 'is_deleted', 'joined_at']
    search_fields = ['user__email', 'team__name']
    readonly_fields = ['joined_at']
    date_hierarchy = 'joined_at'
    ordering = ['-joined_at']

    def get_queryset(self, request):
        """Optimize query."""
        qs = super().get_queryset(request)
        return qs.select_related('user', 'team')
