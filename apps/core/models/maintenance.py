# apps/core/models/maintenance.py
"""
Maintenance Model

Maintenance jobs on fleet motorcycles.
"""

import uuid

from django.db import models
from django.utils import timezone


class Maintenance(models.Model):
    """
    Maintenance record.

    ``motorcycle_id`` is a plain reference; existence is checked by the
    create and update use-cases rather than by a foreign key.
    """

    class Type(models.TextChoices):
        PREVENTIVE = 'PREVENTIVE', 'Preventive'
        CURATIVE = 'CURATIVE', 'Curative'

    class Status(models.TextChoices):
        SCHEDULED = 'SCHEDULED', 'Scheduled'
        IN_PROGRESS = 'IN_PROGRESS', 'In Progress'
        COMPLETED = 'COMPLETED', 'Completed'
        CANCELLED = 'CANCELLED', 'Cancelled'

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    motorcycle_id = models.UUIDField(db_index=True)

    type = models.CharField(max_length=20, choices=Type.choices)
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.SCHEDULED
    )

    # ==========================================================================
    # Dates
    # ==========================================================================

    scheduled_date = models.DateField()
    actual_date = models.DateField(blank=True, null=True)
    next_maintenance_recommendation = models.DateField(blank=True, null=True)

    # ==========================================================================
    # Work
    # ==========================================================================

    mileage_at_maintenance = models.IntegerField(default=0)
    technician_notes = models.TextField(blank=True, null=True)

    # Ordered list of part id strings
    replaced_parts = models.JSONField(default=list, blank=True)
    total_cost = models.DecimalField(
        max_digits=10, decimal_places=2, blank=True, null=True
    )

    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'maintenances'
        ordering = ['scheduled_date', 'id']
        indexes = [
            models.Index(fields=['motorcycle_id'], name='maintenance_motorcy_idx'),
            models.Index(fields=['status', 'scheduled_date'], name='maintenance_status_sched_idx'),
            models.Index(fields=['type'], name='maintenance_type_idx'),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(mileage_at_maintenance__gte=0),
                name='maintenance_mileage_non_negative',
            ),
            models.CheckConstraint(
                condition=models.Q(total_cost__isnull=True) | models.Q(total_cost__gte=0),
                name='maintenance_total_cost_non_negative',
            ),
        ]

    def __str__(self):
        return f"{self.type} {self.motorcycle_id} on {self.scheduled_date} ({self.status})"
