from rest_framework import serializers

from .models import ActivityLog
from .services import DEFAULT_FEED_LIMIT
from apps.accounts.serializers import UserMinimalSerializer


class ActivityLogSerializer(serializers.ModelSerializer):

    user = UserMinimalSerializer(read_only=True)

    class Meta:
        model = ActivityLog
        fields = ['id', 'team', 'user', 'activity_type', 'metadata', 'created_at']
        read_only_fields = fields


class ActivityFilterSerializer(serializers.Serializer):
    """Query parameters for the activity feed."""

    limit = serializers.IntegerField(min_value=1, max_value=200, default=DEFAULT_FEED_LIMIT)
