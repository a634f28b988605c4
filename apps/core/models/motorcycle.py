# apps/core/models/motorcycle.py
import uuid

from django.db import models


class Motorcycle(models.Model):
    """Fleet motorcycle."""

    class Status(models.TextChoices):
        AVAILABLE = 'AVAILABLE', 'Available'
        IN_MAINTENANCE = 'IN_MAINTENANCE', 'In Maintenance'
        OUT_OF_SERVICE = 'OUT_OF_SERVICE', 'Out of Service'

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    brand = models.CharField(max_length=100)
    model = models.CharField(max_length=100)
    vin = models.CharField(max_length=17, unique=True)
    year = models.IntegerField(blank=True, null=True)
    mileage = models.IntegerField(default=0)
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.AVAILABLE
    )

    class Meta:
        db_table = 'motorcycles'
        ordering = ['brand', 'model']

    def __str__(self):
        return f"{self.brand} {self.model} ({self.vin})"
