# apps/api/serializers/maintenance.py
"""
Maintenance Serializers

Input validation only; responses are rendered from use-case results.
"""

from rest_framework import serializers

from apps.core.domain import MaintenanceStatus, MaintenanceType

TYPE_CHOICES = [t.value for t in MaintenanceType]
STATUS_CHOICES = [s.value for s in MaintenanceStatus]


class MaintenanceCreateSerializer(serializers.Serializer):
    """Serializer for scheduling a maintenance."""

    motorcycle_id = serializers.UUIDField()
    type = serializers.ChoiceField(choices=TYPE_CHOICES)
    scheduled_date = serializers.DateField()
    status = serializers.ChoiceField(
        choices=STATUS_CHOICES,
        default=MaintenanceStatus.SCHEDULED.value
    )
    mileage_at_maintenance = serializers.IntegerField(min_value=0, default=0)
    technician_notes = serializers.CharField(
        required=False, allow_blank=True, allow_null=True
    )
    total_cost = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=0,
        required=False, allow_null=True
    )
    replaced_parts = serializers.ListField(
        child=serializers.UUIDField(), required=False, default=list
    )
    next_maintenance_recommendation = serializers.DateField(
        required=False, allow_null=True
    )


class MaintenanceUpdateSerializer(serializers.Serializer):
    """
    Serializer for editing an open maintenance. Status is not editable.

    PUT must send motorcycle_id, type and scheduled_date; PATCH may send any
    subset.
    """

    motorcycle_id = serializers.UUIDField()
    type = serializers.ChoiceField(choices=TYPE_CHOICES)
    scheduled_date = serializers.DateField()
    mileage_at_maintenance = serializers.IntegerField(min_value=0, required=False)
    technician_notes = serializers.CharField(required=False, allow_blank=True)
    total_cost = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=0, required=False
    )
    next_maintenance_recommendation = serializers.DateField(required=False)

    def validate(self, attrs):
        if 'status' in self.initial_data:
            raise serializers.ValidationError({
                'status': 'Use the start, complete or cancel actions to change status.'
            })
        return attrs


class ReplacedPartSerializer(serializers.Serializer):
    part_id = serializers.UUIDField()
    quantity = serializers.IntegerField(min_value=1, default=1)


class MaintenanceCompleteSerializer(serializers.Serializer):
    """Serializer for completing a maintenance."""

    actual_date = serializers.DateField(required=False)
    mileage_at_maintenance = serializers.IntegerField(min_value=0)
    technician_notes = serializers.CharField(required=False, allow_blank=True)
    replaced_parts = ReplacedPartSerializer(many=True, required=False)
    total_cost = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=0,
        required=False, allow_null=True
    )
    next_maintenance_recommendation = serializers.DateField(
        required=False, allow_null=True
    )
