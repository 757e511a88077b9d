from rest_framework import serializers

from .fields import AmountField
from .models import Fine
from apps.accounts.serializers import UserMinimalSerializer


class FineSummarySerializer(serializers.ModelSerializer):
    """Fine info nested in dispute payloads."""

    offender = UserMinimalSerializer(read_only=True)
    amount = AmountField(read_only=True)
    amount_paid = AmountField(read_only=True)

    class Meta:
        model = Fine
        fields = [
            'id',
            'team',
            'offender',
            'custom_label',
            'amount',
            'amount_paid',
            'status',
            'created_at',
        ]
        read_only_fields = fields
