# apps/api/serializers/inventory_part.py
"""
Inventory Part Serializers
"""

from rest_framework import serializers

from apps.core.domain import PartCategory


class InventoryPartCreateSerializer(serializers.Serializer):
    """Serializer for registering a part."""

    name = serializers.CharField(max_length=255)
    category = serializers.ChoiceField(choices=[c.value for c in PartCategory])
    reference_number = serializers.CharField(max_length=100)
    current_stock = serializers.IntegerField(min_value=0, default=0)
    min_stock_threshold = serializers.IntegerField(min_value=0, default=0)
    unit_price = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=0, default=0
    )
    motorcycle_models = serializers.ListField(
        child=serializers.CharField(max_length=100),
        required=False,
        default=list
    )


class StockUpdateSerializer(serializers.Serializer):
    """Serializer for a manual stock movement."""

    quantity_change = serializers.IntegerField()
    reason = serializers.CharField(max_length=255, required=False, allow_blank=True)

    def validate_quantity_change(self, value):
        if value == 0:
            raise serializers.ValidationError('Quantity change cannot be zero.')
        return value


class InventoryPartUpdateSerializer(serializers.Serializer):
    """Serializer for catalogue edits. Stock changes go through the stock action."""

    name = serializers.CharField(max_length=255, required=False)
    category = serializers.ChoiceField(
        choices=[c.value for c in PartCategory], required=False
    )
    reference_number = serializers.CharField(max_length=100, required=False)
    min_stock_threshold = serializers.IntegerField(min_value=0, required=False)
    unit_price = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=0, required=False
    )
    motorcycle_models = serializers.ListField(
        child=serializers.CharField(max_length=100), required=False
    )

    def validate(self, attrs):
        if 'current_stock' in self.initial_data:
            raise serializers.ValidationError({
                'current_stock': 'Use the stock action to change stock levels.'
            })
        return attrs
