"""Serializers for purchase requests and responses."""

from rest_framework import serializers


class PurchaseRequestSerializer(serializers.Serializer):
    """Input shape for a purchase: an account and a list of category counts.

    Category names and counts are checked by the domain, not here.
    """

    account_id = serializers.IntegerField()
    tickets = serializers.ListField(
        child=serializers.DictField(child=serializers.IntegerField()),
        allow_empty=False,
    )


class PurchaseOutcomeSerializer(serializers.Serializer):
    """Serializer for the PurchaseOutcome domain model."""

    account_id = serializers.IntegerField()
    total_seats = serializers.IntegerField()
    total_amount = serializers.IntegerField()


class DomainErrorSerializer(serializers.Serializer):
    code = serializers.CharField(source="code.value")
    message = serializers.CharField()
