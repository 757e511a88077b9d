from django.contrib import admin
from apps.fines.models import Fine


@admin.register(Fine)
class FineAdmin(admin.ModelAdmin):
    """Admin interface for Fines."""

    list_display = [
        'custom_label',
        'team',
        'offender',
        'amount',
        'amount_paid',
        'status',
        'created_at',
    ]
    list_filter = ['status', 'created_at']
    search_fields = ['custom_label', 'team__name', 'offender__email']
    readonly_fields = ['created_at', 'updated_at']
    date_hierarchy = 'created_at'
    ordering = ['-created_at']

    def get_queryset(self, request):
        """Optimize query."""
        qs = super().get_queryset(request)
        return qs.select_related('team', 'offender', 'issued_by')
