# apps/core/models/inventory_part.py
"""
Inventory Part Models

Spare parts stock and the movement log written alongside every stock change.
"""

import uuid

from django.db import models
from django.utils import timezone


class InventoryPart(models.Model):
    """
    Spare part stock record.

    ``current_stock`` is changed with conditional UPDATE statements by the
    repository; the check constraint is the last line against negative stock.
    """

    class Category(models.TextChoices):
        OIL_FILTER = 'OIL_FILTER', 'Oil Filter'
        BRAKE_PAD = 'BRAKE_PAD', 'Brake Pad'
        BRAKE_SYSTEM = 'BRAKE_SYSTEM', 'Brake System'
        TIRE = 'TIRE', 'Tire'
        CHAIN = 'CHAIN', 'Chain'
        SPARK_PLUG = 'SPARK_PLUG', 'Spark Plug'
        OTHER = 'OTHER', 'Other'

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    # ==========================================================================
    # Part Information
    # ==========================================================================

    name = models.CharField(max_length=255)
    category = models.CharField(max_length=20, choices=Category.choices)
    reference_number = models.CharField(max_length=100, unique=True)

    # Sorted list of compatible model names
    motorcycle_models = models.JSONField(default=list, blank=True)

    # ==========================================================================
    # Stock
    # ==========================================================================

    current_stock = models.IntegerField(default=0)
    min_stock_threshold = models.IntegerField(default=0)
    unit_price = models.DecimalField(max_digits=10, decimal_places=2, default=0)

    # ==========================================================================
    # Timestamps
    # ==========================================================================

    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'inventory_parts'
        ordering = ['name']
        verbose_name = 'Inventory Part'
        verbose_name_plural = 'Inventory Parts'
        indexes = [
            models.Index(fields=['category'], name='inventory_p_categor_idx'),
            models.Index(fields=['reference_number'], name='inventory_p_referen_idx'),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(current_stock__gte=0),
                name='inventory_part_stock_non_negative',
            ),
            models.CheckConstraint(
                condition=models.Q(min_stock_threshold__gte=0),
                name='inventory_part_threshold_non_negative',
            ),
            models.CheckConstraint(
                condition=models.Q(unit_price__gte=0),
                name='inventory_part_price_non_negative',
            ),
        ]

    def __str__(self):
        return f"{self.reference_number}: {self.name}"


class StockMovement(models.Model):
    """
    Append-only stock movement log.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    part = models.ForeignKey(
        InventoryPart,
        on_delete=models.CASCADE,
        related_name='movements'
    )

    # Signed change; negative for consumption
    delta = models.IntegerField()
    stock_after = models.IntegerField()
    reason = models.CharField(max_length=255)

    maintenance_id = models.UUIDField(blank=True, null=True)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'stock_movements'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['part', '-created_at'], name='stock_movem_part_created_idx'),
            models.Index(fields=['maintenance_id'], name='stock_movem_mainten_idx'),
        ]

    def __str__(self):
        return f"{self.part_id} ({self.delta:+d}): {self.reason}"
