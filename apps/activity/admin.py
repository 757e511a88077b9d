from django.contrib import admin
from apps.activity.models import ActivityLog


@admin.register(ActivityLog)
class ActivityLogAdmin(admin.ModelAdmin):
    """Read-only admin for the audit log."""

    list_display = ['activity_type', 'team', 'user', 'created_at']
    list_filter = ['activity_type', 'created_at']
    search_fields = ['team__name', 'user__email']
    readonly_fields = ['team', 'user', 'activity_type', 'metadata', 'created_at']
    date_hierarchy = 'created_at'
    ordering = ['-created_at']

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False

    def get_queryset(self, request):
        """Optimize query."""
        qs = super().get_queryset(request)
        return qs.select_related('team', 'user')
