# apps/core/repositories/django_orm.py
"""
Django ORM Repositories

Translate between ORM rows and domain entities. Stock changes are written
with conditional UPDATE statements so concurrent writers can never drive a
part below zero.
"""

import uuid
import logging
from datetime import date
from typing import Iterable, List, Optional

from django.db import DEFAULT_DB_ALIAS, IntegrityError, transaction
from django.db.models import F
from django.utils import timezone

from apps.core import models as orm
from apps.core.domain import (
    InsufficientStockError,
    InventoryPart,
    InventoryPartNotFoundError,
    InventoryPartValidationError,
    Maintenance,
    MaintenanceStatus,
    MaintenanceType,
    MaintenanceValidationError,
    Motorcycle,
    PartCategory,
)

from .base import (
    InventoryPartRepository,
    MaintenanceRepository,
    MotorcycleRepository,
)

logger = logging.getLogger(__name__)


def parse_uuid(value) -> Optional[uuid.UUID]:
    """Return ``value`` as a UUID, or None when it cannot be one."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError):
        return None


class _DjangoRepository:

    model = None

    def __init__(self, using: str = DEFAULT_DB_ALIAS):
        self.using = using

    def _queryset(self):
        return self.model.objects.using(self.using)


# =============================================================================
# MOTORCYCLES
# =============================================================================

class DjangoMotorcycleRepository(_DjangoRepository, MotorcycleRepository):

    model = orm.Motorcycle

    def find_by_id(self, motorcycle_id) -> Optional[Motorcycle]:
        pk = parse_uuid(motorcycle_id)
        if pk is None:
            return None
        row = self._queryset().filter(id=pk).first()
        if row is None:
            return None
        return Motorcycle(
            id=row.id,
            brand=row.brand,
            model=row.model,
            vin=row.vin,
            year=row.year,
            mileage=row.mileage,
            status=row.status,
        )


# =============================================================================
# INVENTORY PARTS
# =============================================================================

class DjangoInventoryPartRepository(_DjangoRepository, InventoryPartRepository):

    model = orm.InventoryPart

    @staticmethod
    def _to_entity(row: orm.InventoryPart) -> InventoryPart:
        return InventoryPart.create(
            id=row.id,
            name=row.name,
            category=row.category,
            reference_number=row.reference_number,
            current_stock=row.current_stock,
            min_stock_threshold=row.min_stock_threshold,
            unit_price=row.unit_price,
            motorcycle_models=row.motorcycle_models,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    @staticmethod
    def _catalogue_fields(part: InventoryPart) -> dict:
        return {
            'name': part.name,
            'category': part.category.value,
            'reference_number': part.reference_number,
            'min_stock_threshold': part.min_stock_threshold,
            'unit_price': part.unit_price,
            'motorcycle_models': sorted(part.motorcycle_models),
            'updated_at': part.updated_at,
        }

    # ==========================================================================
    # Reads
    # ==========================================================================

    def find_by_id(self, part_id, for_update: bool = False) -> Optional[InventoryPart]:
        pk = parse_uuid(part_id)
        if pk is None:
            return None
        queryset = self._queryset()
        if for_update:
            queryset = queryset.select_for_update()
        row = queryset.filter(id=pk).first()
        return self._to_entity(row) if row is not None else None

    def find_all(self) -> List[InventoryPart]:
        return [self._to_entity(row) for row in self._queryset().order_by('name', 'id')]

    def find_by_category(self, category) -> List[InventoryPart]:
        category = PartCategory(category)
        queryset = self._queryset().filter(category=category.value).order_by('name', 'id')
        return [self._to_entity(row) for row in queryset]

    def find_by_motorcycle_model(self, model_name: str) -> List[InventoryPart]:
        # JSON containment lookups are not available on every backend
        return [
            part for part in self.find_all()
            if part.is_compatible_with(model_name)
        ]

    def find_low_stock_parts(self) -> List[InventoryPart]:
        queryset = self._queryset().filter(
            current_stock__lte=F('min_stock_threshold')
        ).order_by('current_stock', 'name')
        return [self._to_entity(row) for row in queryset]

    # ==========================================================================
    # Writes
    # ==========================================================================

    def save(self, part: InventoryPart) -> InventoryPart:
        try:
            with transaction.atomic(using=self.using):
                row = self._queryset().create(
                    id=part.id,
                    current_stock=part.current_stock,
                    created_at=part.created_at,
                    **self._catalogue_fields(part),
                )
        except IntegrityError:
            raise InventoryPartValidationError(
                f"Reference number {part.reference_number} already exists",
                field='reference_number',
            )

        logger.info(f"Saved inventory part {row.reference_number} ({row.id})")
        return self._to_entity(row)

    def update(self, part: InventoryPart) -> InventoryPart:
        try:
            with transaction.atomic(using=self.using):
                updated = self._queryset().filter(id=part.id).update(
                    **self._catalogue_fields(part)
                )
        except IntegrityError:
            raise InventoryPartValidationError(
                f"Reference number {part.reference_number} already exists",
                field='reference_number',
            )
        if not updated:
            raise InventoryPartNotFoundError(part.id)
        return self.find_by_id(part.id)

    def delete(self, part_id) -> bool:
        pk = parse_uuid(part_id)
        if pk is None:
            return False
        deleted, _ = self._queryset().filter(id=pk).delete()
        return deleted > 0

    def decrease_stock(
        self,
        part_id,
        quantity: int,
        reason: str,
        maintenance_id: Optional[uuid.UUID] = None,
    ) -> InventoryPart:
        self._check_quantity(quantity)
        pk = parse_uuid(part_id)
        if pk is None:
            raise InventoryPartNotFoundError(part_id)

        updated = self._queryset().filter(
            id=pk, current_stock__gte=quantity
        ).update(
            current_stock=F('current_stock') - quantity,
            updated_at=timezone.now(),
        )
        if not updated:
            available = self._queryset().filter(id=pk).values_list(
                'current_stock', flat=True
            ).first()
            if available is None:
                raise InventoryPartNotFoundError(part_id)
            raise InsufficientStockError(pk, requested=quantity, available=available)

        return self._record_movement(pk, -quantity, reason, maintenance_id)

    def increase_stock(
        self,
        part_id,
        quantity: int,
        reason: str,
        maintenance_id: Optional[uuid.UUID] = None,
    ) -> InventoryPart:
        self._check_quantity(quantity)
        pk = parse_uuid(part_id)
        if pk is None:
            raise InventoryPartNotFoundError(part_id)

        updated = self._queryset().filter(id=pk).update(
            current_stock=F('current_stock') + quantity,
            updated_at=timezone.now(),
        )
        if not updated:
            raise InventoryPartNotFoundError(part_id)

        return self._record_movement(pk, quantity, reason, maintenance_id)

    @staticmethod
    def _check_quantity(quantity) -> None:
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            raise InventoryPartValidationError(
                'Quantity must be a positive integer', field='quantity'
            )

    def _record_movement(self, pk, delta, reason, maintenance_id) -> InventoryPart:
        row = self._queryset().get(id=pk)
        orm.StockMovement.objects.using(self.using).create(
            part=row,
            delta=delta,
            stock_after=row.current_stock,
            reason=reason or '',
            maintenance_id=maintenance_id,
        )
        logger.info(
            f"Stock of {row.reference_number} changed by {delta:+d}, "
            f"now {row.current_stock} ({reason})"
        )
        return self._to_entity(row)


# =============================================================================
# MAINTENANCES
# =============================================================================

class DjangoMaintenanceRepository(_DjangoRepository, MaintenanceRepository):

    model = orm.Maintenance

    @staticmethod
    def _to_entity(row: orm.Maintenance) -> Maintenance:
        return Maintenance.create(
            id=row.id,
            motorcycle_id=row.motorcycle_id,
            type=row.type,
            status=row.status,
            scheduled_date=row.scheduled_date,
            actual_date=row.actual_date,
            mileage_at_maintenance=row.mileage_at_maintenance,
            technician_notes=row.technician_notes,
            replaced_parts=row.replaced_parts,
            total_cost=row.total_cost,
            next_maintenance_recommendation=row.next_maintenance_recommendation,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    @staticmethod
    def _fields(maintenance: Maintenance) -> dict:
        return {
            'motorcycle_id': maintenance.motorcycle_id,
            'type': maintenance.type.value,
            'status': maintenance.status.value,
            'scheduled_date': maintenance.scheduled_date,
            'actual_date': maintenance.actual_date,
            'mileage_at_maintenance': maintenance.mileage_at_maintenance,
            'technician_notes': maintenance.technician_notes,
            'replaced_parts': [str(part_id) for part_id in maintenance.replaced_parts],
            'total_cost': maintenance.total_cost,
            'next_maintenance_recommendation': maintenance.next_maintenance_recommendation,
            'updated_at': maintenance.updated_at,
        }

    def _list(self, **filters) -> List[Maintenance]:
        queryset = self._queryset().filter(**filters).order_by('scheduled_date', 'id')
        return [self._to_entity(row) for row in queryset]

    # ==========================================================================
    # Reads
    # ==========================================================================

    def find_by_id(self, maintenance_id, for_update: bool = False) -> Optional[Maintenance]:
        pk = parse_uuid(maintenance_id)
        if pk is None:
            return None
        queryset = self._queryset()
        if for_update:
            queryset = queryset.select_for_update()
        row = queryset.filter(id=pk).first()
        return self._to_entity(row) if row is not None else None

    def find_all(self) -> List[Maintenance]:
        return self._list()

    def find_by_motorcycle_id(self, motorcycle_id) -> List[Maintenance]:
        pk = parse_uuid(motorcycle_id)
        if pk is None:
            return []
        return self._list(motorcycle_id=pk)

    def find_by_type(self, type) -> List[Maintenance]:
        return self._list(type=MaintenanceType(type).value)

    def find_by_status(self, status) -> List[Maintenance]:
        return self._list(status=MaintenanceStatus(status).value)

    def find_due_maintenances(self, current_date: date) -> List[Maintenance]:
        return self._list(
            status=MaintenanceStatus.SCHEDULED.value,
            scheduled_date__lte=current_date,
        )

    # ==========================================================================
    # Writes
    # ==========================================================================

    def save(self, maintenance: Maintenance) -> Maintenance:
        try:
            with transaction.atomic(using=self.using):
                row = self._queryset().create(
                    id=maintenance.id,
                    created_at=maintenance.created_at,
                    **self._fields(maintenance),
                )
        except IntegrityError as e:
            raise MaintenanceValidationError(f"Could not store maintenance: {e}")
        return self._to_entity(row)

    def update(
        self,
        maintenance: Maintenance,
        expected_statuses: Optional[Iterable[MaintenanceStatus]] = None,
    ) -> bool:
        queryset = self._queryset().filter(id=maintenance.id)
        if expected_statuses is not None:
            queryset = queryset.filter(
                status__in=[MaintenanceStatus(s).value for s in expected_statuses]
            )
        return queryset.update(**self._fields(maintenance)) == 1

    def delete(self, maintenance_id) -> bool:
        pk = parse_uuid(maintenance_id)
        if pk is None:
            return False
        deleted, _ = self._queryset().filter(id=pk).delete()
        return deleted > 0
