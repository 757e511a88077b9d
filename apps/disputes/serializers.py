from django.core.exceptions import ObjectDoesNotExist
from rest_framework import serializers

from .models import Dispute, DisputeStatus, DisputeVote
from apps.accounts.serializers import UserMinimalSerializer
from apps.fines.serializers import FineSummarySerializer


class DisputeVoteSerializer(serializers.ModelSerializer):
    """Serializer for dispute votes."""

    user = UserMinimalSerializer(read_only=True)

    class Meta:
        model = DisputeVote
        fields = ['id', 'dispute', 'user', 'vote', 'created_at']
        read_only_fields = fields


class DisputeSerializer(serializers.ModelSerializer):
    """Main serializer for disputes."""

    fine = serializers.SerializerMethodField()
    disputed_by = UserMinimalSerializer(read_only=True)
    resolved_by = UserMinimalSerializer(read_only=True)

    class Meta:
        model = Dispute
        fields = [
            'id',
            'fine_id',
            'fine',
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
        read_only_fields = fields

    def get_fine(self, obj):
        """Nested fine, or None once an approved dispute has deleted it."""
        try:
            fine = obj.fine
        except ObjectDoesNotExist:
            return None
        return FineSummarySerializer(fine).data


class DisputeDetailSerializer(DisputeSerializer):
    """Dispute with its votes."""

    votes = DisputeVoteSerializer(many=True, read_only=True)

    class Meta(DisputeSerializer.Meta):
        fields = DisputeSerializer.Meta.fields + ['votes']
        read_only_fields = fields


# =============================================================================
# Input serializers
# =============================================================================

class CreateDisputeSerializer(serializers.Serializer):
    """Input for contesting a fine."""

    reason = serializers.CharField(min_length=10, max_length=1000)


class CastVoteSerializer(serializers.Serializer):
    """Input for voting on a dispute."""

    vote = serializers.BooleanField()


class ResolveDisputeSerializer(serializers.Serializer):
    """Input for an admin resolution."""

    approved = serializers.BooleanField()
    note = serializers.CharField(max_length=500, required=False, allow_blank=True)


class DisputeFilterSerializer(serializers.Serializer):
    """Query parameters for listing team disputes."""

    status = serializers.ChoiceField(choices=DisputeStatus.choices, required=False)
