from rest_framework import serializers
from .models import DisputeMode, Team
from apps.teams.services import build_dispute_config


class DisputeSettingsSerializer(serializers.ModelSerializer):
    """Current dispute settings of a team."""

    effective_votes_required = serializers.SerializerMethodField()

    class Meta:
        model = Team
        fields = [
            'id',
            'dispute_enabled',
            'dispute_mode',
            'dispute_votes_required',
            'effective_votes_required',
            'updated_at',
        ]
        read_only_fields = fields

    def get_effective_votes_required(self, obj):
        return build_dispute_config(obj).dispute_votes_required


class UpdateDisputeSettingsSerializer(serializers.Serializer):
    """Input for changing dispute settings. Omitted fields stay unchanged."""

    dispute_enabled = serializers.BooleanField(required=False)
    dispute_mode = serializers.ChoiceField(
        choices=DisputeMode.choices,
        required=False,
        allow_null=True,
    )
    dispute_votes_required = serializers.IntegerField(
        min_value=1,
        max_value=100,
        required=False,
        allow_null=True,
    )
